"""Constants for the upstream API adapters.

No authentication is required for any of the services.
"""

# GET ?format=json -> {"ip": "..."}
DEFAULT_IP_LOOKUP_URL = "https://api.ipify.org"

# GET /{ip} -> {"success": bool, "message": str, "latitude": num, "longitude": num, ...}
DEFAULT_GEOLOCATION_URL = "http://ipwho.is"

# GET ?lat=..&lon=.. -> {"response": [{"risetime": num, "duration": num}, ...]}
DEFAULT_FLYOVER_URL = "https://iss-flyover.herokuapp.com/json/"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Number of body characters included in warning logs
LOGGED_BODY_LIMIT = 200
