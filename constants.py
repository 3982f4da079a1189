APP_TITLE = "Freight Origin Map"

ORIGIN_TEXT_COLS = ["origin_city", "origin_state"]
DEST_TEXT_COLS = ["dest_city", "dest_state"]
COORD_COLS = ["orig_lat", "orig_lng", "dest_lat", "dest_lng"]
EXPECTED_COLS = ORIGIN_TEXT_COLS + ["orig_lat", "orig_lng"] + DEST_TEXT_COLS + ["dest_lat", "dest_lng"]
BOOKING_URL_COLS = ["booking_url", "bookingUrl"]

CSV_EXTENSION = "csv"
UPLOAD_TYPES = ["csv", "xlsx"]
SAMPLE_FILE = "sample_shipments.csv"

MAP_CENTER = (39.5, -98.35)
MAP_ZOOM = 4
MAP_TILES = "OpenStreetMap"
MAP_HEIGHT = 560
ROUTE_STYLE = {"color": "#FF851B", "weight": 2}

PLACEHOLDER_LINK = "#"
SIDEBAR_PLACEHOLDER = "Click a city marker to see routes"
BOOKING_LINK_TEXT = "Book / Interest"
