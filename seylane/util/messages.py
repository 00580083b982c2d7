""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "SETTINGS_UPDATE_SUCCESS"   :   "Settings updated successfully.",
    "TEST_MESSAGE_SENT"         :   "Message sent.",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"           :   "Request body is required",

    # Webhook Errors
    "WEBHOOK_PARAMS_MISSING"    :   "hub.mode and hub.verify_token are required.",
    "WEBHOOK_VERIFY_FAILED"     :   "Webhook verification failed.",
    "TEST_MESSAGE_FIELDS"       :   "recipient_id and message required",
    "TEST_MESSAGE_FAILED"       :   "Failed to send message",

    # Settings Errors
    "SETTINGS_EMPTY"            :   "At least one setting is required.",
    "SETTINGS_UNKNOWN_KEY"      :   "Unknown setting key: {key}",
    "SETTINGS_INVALID_VALUE"    :   "Invalid value for setting '{key}'.",
    "SETTING_NOT_FOUND"         :   "Setting not found",

    # Conversation Errors
    "CONVERSATION_NOT_FOUND"    :   "Conversation not found",
    "INVALID_PAGINATION"        :   "limit must be between 1 and 200 and offset must be >= 0",

    # Analytics Errors
    "INVALID_DAYS"              :   "days must be between 1 and 365",
    "INVALID_LOG_LIMIT"         :   "limit must be between 1 and 500",

    # Connection Test Errors
    "UNKNOWN_SERVICE"           :   "Unknown service: {service}. Allowed: openai, anthropic, woocommerce, instagram",
}


# ERROR CODES
ERROR_CODES = {
    "HTTP_400_BAD_REQUEST"                  :   400,
    "HTTP_403_NOT_AUTHORIZED"               :   403,
    "HTTP_404_NOT_FOUND"                    :   404,
    "HTTP_500_INTERNAL_ERROR"               :   500
}
