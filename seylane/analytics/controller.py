"""
Analytics Controller
Read-only reporting over stored conversations and messages.
"""

# Services
from ..analytics.services.analytics_service import AnalyticsService





class AnalyticsController:

    def __init__(self):
        """ Initialize services... """

        self.analytics_service = AnalyticsService()



    def overview(self) -> dict:
        return self.analytics_service.overview()



    def messages_over_time(self, days: int) -> dict:
        """
        Returns:
            {"days": int, "series": [{"date": "YYYY-MM-DD", "count": int}]}
        """

        return {
            "days": days,
            "series": self.analytics_service.messages_over_time(days)
        }



    def intent_distribution(self) -> dict:
        return {"intents": self.analytics_service.intent_distribution()}



    def recent_logs(self, limit: int) -> dict:
        return {
            "logs": self.analytics_service.recent_logs(limit),
            "limit": limit
        }
