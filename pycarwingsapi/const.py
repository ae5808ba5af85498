#  SPDX-License-Identifier: Apache-2.0
"""Constants for the Carwings API."""

BASE_URL = "https://gdcportalgw.its-mo.com/gworchest_160803A/gdc/"

# Extracted from the NissanConnect EV app
INITIAL_APP_STRINGS = "geORNtsZe5I4lRGjG9GZiA"

# The baseprm the handshake has always returned so far
BLOWFISH_KEY = "uyI5Dj9g8VCOFDnBRUbr3g"

USER_AGENT = "pycarwingsapi"
TIMEOUT = 90

INITIAL_APP_ENDPOINT = "InitialApp.php"
LOGIN_ENDPOINT = "UserLoginRequest.php"
BATTERY_STATUS_CHECK_ENDPOINT = "BatteryStatusCheckRequest.php"
BATTERY_STATUS_CHECK_RESULT_ENDPOINT = "BatteryStatusCheckResultRequest.php"
BATTERY_STATUS_RECORDS_ENDPOINT = "BatteryStatusRecordsRequest.php"
REMOTE_AC_RECORDS_ENDPOINT = "RemoteACRecordsRequest.php"

STATUS_OK = 200

REGION_USA = "NNA"
REGION_EUROPE = "NE"
REGION_CANADA = "NCI"
REGION_AUSTRALIA = "NMA"
REGION_JAPAN = "NML"

REGIONS = {
    "usa": REGION_USA,
    "europe": REGION_EUROPE,
    "canada": REGION_CANADA,
    "australia": REGION_AUSTRALIA,
    "japan": REGION_JAPAN,
}

# Observed in traffic only, meaning of other values is unconfirmed
RESPONSE_FLAG_READY = 1
OPERATION_RESULT_ELECTRIC_WAVE_ABNORMAL = "ELECTRIC_WAVE_ABNORMAL"

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M"

MILES_PER_METER = 0.000621371
