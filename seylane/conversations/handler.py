"""
File: Conversation Routes

Handles:
    - List conversations
    - Conversation detail with messages
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Validations
from ..conversations.validations.conversation_validation import ConversationValidation

# Controller
from ..conversations.controller import ConversationController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
conversations_namespace = Namespace('conversations', description = 'Conversation History APIs')





@conversations_namespace.route('')
class ConversationList(Resource):

    @conversations_namespace.param('limit', 'Page size (1-200, default 50)', type = int)
    @conversations_namespace.param('offset', 'Rows to skip (default 0)', type = int)
    def get(self):
        """
        List conversations, most recently active first
        """

        try:
            limit, offset = ConversationValidation.validate_pagination(
                request.args.get('limit'),
                request.args.get('offset')
            )

            result = ConversationController().list_conversations(limit, offset)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@conversations_namespace.route('/<int:conversation_id>')
class ConversationDetail(Resource):

    def get(self, conversation_id):
        """
        Conversation with its full message history
        """

        try:
            result = ConversationController().get_conversation(conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
