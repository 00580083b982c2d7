""" Urls of the modules define here... """

# All Namespaces...
from ..bot.handler import webhook_namespace
from ..settings.handler import settings_namespace
from ..conversations.handler import conversations_namespace
from ..analytics.handler import analytics_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api):
        """ Function for adding namespaces... """

        api.add_namespace(webhook_namespace, path = "/webhook")
        api.add_namespace(settings_namespace, path = "/api")
        api.add_namespace(conversations_namespace, path = "/api/conversations")
        api.add_namespace(analytics_namespace, path = "/api")
