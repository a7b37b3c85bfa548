from django.apps import AppConfig


class MdEngineConfig(AppConfig):
    name = "mdengine"
    verbose_name = "Markdown"

    def ready(self):
        """Register markdown hooks named in settings."""
        from mdengine.markdown.hooks import hooks, load_hooks_from_config

        load_hooks_from_config(hooks)
