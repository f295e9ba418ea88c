"""Constants for the Key Light HTTP API and the adjustment engine."""

DEFAULT_KEY_ADDRESS = "http://keylight:9123"
DEFAULT_FILL_ADDRESS = "http://filllight:9123"
DEFAULT_TIMEOUT = 5.0

# Operational bounds applied when reconciling a light.
BRIGHTNESS_MIN = 3
BRIGHTNESS_MAX = 100
TEMPERATURE_MIN = 2900
TEMPERATURE_MAX = 7000

# Bounds of the circadian curve.
CIRCADIAN_BRIGHTNESS_MIN = 20
CIRCADIAN_BRIGHTNESS_MAX = 100
CIRCADIAN_TEMPERATURE_MIN = 2900
CIRCADIAN_TEMPERATURE_MAX = 7000

# The Fill Light runs dimmer and warmer than the Key Light.
FILL_BRIGHTNESS_OFFSET = 25
FILL_TEMPERATURE_OFFSET = 500

# Device temperature units (roughly mireds).
API_TEMPERATURE_MIN = 143
API_TEMPERATURE_MAX = 344

PATH_ACCESSORY_INFO = "/elgato/accessory-info"
PATH_LIGHTS = "/elgato/lights"

KEY_NUMBER_OF_LIGHTS = "numberOfLights"
KEY_LIGHTS = "lights"
KEY_ON = "on"
KEY_BRIGHTNESS = "brightness"
KEY_TEMPERATURE = "temperature"
KEY_PRODUCT_NAME = "productName"
KEY_DISPLAY_NAME = "displayName"
KEY_SERIAL_NUMBER = "serialNumber"
KEY_FIRMWARE_VERSION = "firmwareVersion"
KEY_FIRMWARE_BUILD_NUMBER = "firmwareBuildNumber"
KEY_HARDWARE_BOARD_TYPE = "hardwareBoardType"

ICON_ON = "\N{ELECTRIC LIGHT BULB}"
ICON_OFF = "\N{NO ENTRY SIGN}"
