"""Configuration constants for the sales analytics engine."""

# Period kind used when the request does not name one
DEFAULT_PERIOD = "month"

# Category label for lines whose product has no category
UNCATEGORIZED_LABEL = "uncategorized"

# Purchase rate is not computed yet; every report carries this constant
PURCHASE_RATE_PLACEHOLDER = 100

# Worker threads for the concurrent record fetches (current + previous period, two sources each)
MAX_FETCH_WORKERS = 4
