""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-this-secret')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Seylane Chat Bot",
                                "version": "1.0",
                                "description": "Instagram DM support bot: classifies \
                                customer intent, searches the WooCommerce catalog and \
                                replies automatically."
                            }


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'seylane')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# Celery Constants
CELERY_BROKER_URL               =   config('CELERY_BROKER_URL', default = 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND           =   config('CELERY_RESULT_BACKEND', default = 'redis://localhost:6379/0')
CELERY_TASK_ALWAYS_EAGER        =   config('CELERY_TASK_ALWAYS_EAGER', default = False, cast = bool)


# LLM Provider Constants
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'openai')
LLM_TIMEOUT_SECONDS             =   config('LLM_TIMEOUT_SECONDS', default = 10.0, cast = float)


# OpenAI Constants
OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_DEFAULT_MODEL            =   config('OPENAI_DEFAULT_MODEL', default = 'gpt-4')


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-3-5-haiku-latest')


# WooCommerce Constants
WOOCOMMERCE_URL                 =   config('WOOCOMMERCE_URL', default = '')
WOOCOMMERCE_CONSUMER_KEY        =   config('WOOCOMMERCE_CONSUMER_KEY', default = '')
WOOCOMMERCE_CONSUMER_SECRET     =   config('WOOCOMMERCE_CONSUMER_SECRET', default = '')
WOOCOMMERCE_API_VERSION         =   "wc/v3"


# Instagram Constants
INSTAGRAM_PAGE_ACCESS_TOKEN     =   config('INSTAGRAM_PAGE_ACCESS_TOKEN', default = '')
INSTAGRAM_VERIFY_TOKEN          =   config('INSTAGRAM_VERIFY_TOKEN', default = '')
GRAPH_API_VERSION               =   config('GRAPH_API_VERSION', default = 'v18.0')
GRAPH_API_BASE_URL              =   "https://graph.facebook.com"


# Outbound HTTP
HTTP_TIMEOUT_SECONDS            =   config('HTTP_TIMEOUT_SECONDS', default = 10.0, cast = float)


# Pipeline Behaviour
TYPING_DELAY_MS                 =   config('TYPING_DELAY_MS', default = 1000, cast = int)
PRODUCT_TYPING_DELAY_MS         =   config('PRODUCT_TYPING_DELAY_MS', default = 1500, cast = int)
INTENT_ATTACHMENT_MODE          =   config('INTENT_ATTACHMENT_MODE', default = 'message_id')
PRODUCT_DIGEST_MODE             =   config('PRODUCT_DIGEST_MODE', default = 'sequential')


# Logging
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
LOG_FILE                        =   config('LOG_FILE', default = '')
