"""
File: Analytics Routes

Handles:
    - Overview counters
    - Message volume over time
    - Intent distribution
    - Recent message log
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Validations
from ..analytics.validations.analytics_validation import AnalyticsValidation

# Controller
from ..analytics.controller import AnalyticsController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
analytics_namespace = Namespace('analytics', description = 'Analytics & Log APIs')





@analytics_namespace.route('/analytics/overview')
class AnalyticsOverview(Resource):

    def get(self):
        """
        Conversation and message totals

        Response:
        {
            "total_conversations":  12,
            "total_messages":       140,
            "active_conversations": 3,
            "product_searches":     27
        }
        """

        try:
            result = AnalyticsController().overview()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@analytics_namespace.route('/analytics/messages-over-time')
class MessagesOverTime(Resource):

    @analytics_namespace.param('days', 'Days to look back (1-365, default 30)', type = int)
    def get(self):
        """
        Messages per day
        """

        try:
            days = AnalyticsValidation.validate_days(request.args.get('days'))

            result = AnalyticsController().messages_over_time(days)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@analytics_namespace.route('/analytics/intent-distribution')
class IntentDistribution(Resource):

    def get(self):
        """
        Messages per classified intent
        """

        try:
            result = AnalyticsController().intent_distribution()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@analytics_namespace.route('/logs')
class RecentLogs(Resource):

    @analytics_namespace.param('limit', 'Messages to return (1-500, default 100)', type = int)
    def get(self):
        """
        Most recent messages with the sender's Instagram id and username
        """

        try:
            limit = AnalyticsValidation.validate_log_limit(request.args.get('limit'))

            result = AnalyticsController().recent_logs(limit)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
