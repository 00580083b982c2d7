"""
File: Settings Routes

Handles:
    - List / update bot settings
    - Read one setting
    - Test connections to OpenAI, Anthropic, WooCommerce and Instagram
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Validations
from ..settings.validations.settings_validation import SettingsValidation

# Controller
from ..settings.controller import SettingsController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
settings_namespace = Namespace('settings', description = 'Bot Settings APIs')





@settings_namespace.route('/settings')
class Settings(Resource):

    def get(self):
        """
        List every setting (secrets masked)
        """

        try:
            result = SettingsController().list_settings()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def post(self):
        """
        Update settings

        Request:
        {
            "openai_api_key": "sk-...",
            "ai_provider":    "anthropic"
        }
        """

        try:
            data = request.get_json(silent = True)

            # Validations
            updates = SettingsValidation.validate_updates(data)

            # Controller
            result = SettingsController().update_settings(updates)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@settings_namespace.route('/settings/<string:key>')
class SettingDetail(Resource):

    def get(self, key):
        """
        Read one setting
        """

        try:
            SettingsValidation.validate_key(key)

            result = SettingsController().get_setting(key)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@settings_namespace.route('/test/<string:service>')
class ConnectionTest(Resource):

    def get(self, service):
        """
        Test the connection to an external service

        Response:
        {
            "success": true,
            "message": "Connected successfully to https://shop.example.com"
        }
        """

        try:
            SettingsValidation.validate_service(service)

            return SettingsController().test_connection(service), 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
