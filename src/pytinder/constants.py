"""Wire constants shared by every request."""

API_HOST = "https://api.gotinder.com"

USER_AGENT = "Tinder Android Version 2.2.3"
OS_VERSION = "16"

AUTH_HEADER = "X-Auth-Token"

# Empty cursor asks the updates endpoint for the full history
FULL_HISTORY = ""
