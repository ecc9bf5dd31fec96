# Environment variables
ENV_BOT_TOKEN = "TELEGRAM_BOT_TOKEN"
ENV_BASE_BOT_URL = "TELEGRAM_BASE_BOT_URL"
ENV_TIMEOUT = "TELEGRAM_TIMEOUT"
ENV_CONNECT_TIMEOUT = "TELEGRAM_CONNECT_TIMEOUT"
ENV_DISABLE_SSL_VERIFY = "TELEGRAM_DISABLE_SSL_VERIFY"
ENV_CA_BUNDLE = "TELEGRAM_CA_BUNDLE"

# Headers
HEADER_USER_AGENT = "User-Agent"

# Bot API
DEFAULT_BASE_BOT_URL = "https://api.telegram.org/bot"
DEFAULT_TIMEOUT = 60
DEFAULT_CONNECT_TIMEOUT = 10
REPLY_MARKUP_PARAM = "reply_markup"

# Transport options
OPTION_QUERY = "query"
OPTION_FORM = "form"
OPTION_MULTIPART = "multipart"
