# mdengine/markdown/extensions/smart_punctuation.py

from markdown.extensions.smarty import SmartyExtension

from .base import BaseExtension, EnvironmentAwareInterface, SettingsInterface

SETTINGS_KEY = "smartpunct"

# Setting name -> python-markdown smarty substitution key.
SUBSTITUTIONS = {
    "double_quote_opener": "left-double-quote",
    "double_quote_closer": "right-double-quote",
    "single_quote_opener": "left-single-quote",
    "single_quote_closer": "right-single-quote",
}


class SmartPunctuationExtension(BaseExtension, EnvironmentAwareInterface, SettingsInterface):
    """Converts ASCII quotes, dashes and ellipses to their Unicode equivalents."""

    @classmethod
    def default_settings(cls):
        return {
            "double_quote_opener": "“",
            "double_quote_closer": "”",
            "single_quote_opener": "‘",
            "single_quote_closer": "’",
        }

    def settings_key(self):
        return SETTINGS_KEY

    def set_environment(self, environment):
        settings = environment.config.get(SETTINGS_KEY, self.settings.all())
        substitutions = {
            substitution: settings[name]
            for name, substitution in SUBSTITUTIONS.items()
            if settings.get(name)
        }
        environment.add_extension(SmartyExtension(substitutions=substitutions))
