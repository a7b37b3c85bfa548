# mdengine/markdown/extensions/link_renderer.py
"""
Enhanced link rendering.

Adds ``target="_blank"`` and ``rel`` values to links produced by the parser.
Raw HTML ``<a>`` tags written in the source are not touched; they never
enter the element tree.
"""

from urllib.parse import urlparse

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .base import AllowedHtmlInterface, BaseExtension, EnvironmentAwareInterface

NO_FOLLOW_CHOICES = ("", "all", "external", "internal")


def _check_no_follow(value):
    if value not in NO_FOLLOW_CHOICES:
        raise ValueError(f"no_follow must be one of {NO_FOLLOW_CHOICES!r}, got {value!r}")


class _LinkTreeprocessor(Treeprocessor):
    def __init__(self, md, extension):
        super().__init__(md)
        self.extension = extension

    def run(self, root):
        for link in root.iter("a"):
            self.extension.decorate(link)


class _LinkMarkdownExtension(Extension):
    def __init__(self, extension, **kwargs):
        self.extension = extension
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # After the inline treeprocessor (20) has created the <a> elements.
        md.treeprocessors.register(_LinkTreeprocessor(md, self.extension), "enhanced_links", 15)


class LinkRenderer(BaseExtension, AllowedHtmlInterface, EnvironmentAwareInterface):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        _check_no_follow(self.get_setting("no_follow"))
        # Parsed lazily from internal_host_whitelist and the base URL; reset
        # whenever the whitelist setting changes.
        self._internal_hosts = None

    @classmethod
    def default_settings(cls):
        return {
            "external_new_window": True,
            "internal_host_whitelist": "",
            "no_follow": "external",
        }

    def set_setting(self, key, value):
        if key == "no_follow":
            _check_no_follow(value)
        super().set_setting(key, value)
        if key == "internal_host_whitelist":
            self._internal_hosts = None

    def _base_url(self) -> str:
        if self.parser is not None:
            return self.parser.config.get("base_url", "")
        return ""

    @property
    def internal_hosts(self) -> frozenset:
        if self._internal_hosts is None:
            whitelist = self.get_setting("internal_host_whitelist") or ""
            hosts = {line.strip().lower() for line in whitelist.splitlines() if line.strip()}

            # The site's own host is always internal.
            base_host = urlparse(self._base_url()).hostname
            if base_host:
                hosts.add(base_host.lower())

            self._internal_hosts = frozenset(hosts)
        return self._internal_hosts

    def is_external_url(self, url: str) -> bool:
        """Whether ``url`` points at a host outside the internal host list."""
        try:
            host = urlparse(url).hostname
        except ValueError:
            return False

        # Only URLs that actually have a host (e.g. not fragments).
        if not host:
            return False

        return host.lower() not in self.internal_hosts

    def decorate(self, link) -> None:
        """Add target/rel attributes to an ElementTree ``<a>`` element."""
        external = self.is_external_url(link.get("href", ""))
        rel = [value for value in (link.get("rel") or "").split() if value]

        if external and self.get_setting("external_new_window"):
            link.set("target", "_blank")
            rel += ["noopener", "noreferrer"]

        no_follow = self.get_setting("no_follow")
        if (
            no_follow == "all"
            or (external and no_follow == "external")
            or (not external and no_follow == "internal")
        ):
            rel.append("nofollow")

        if rel:
            link.set("rel", " ".join(dict.fromkeys(rel)))

    def allowed_html_tags(self, parser):
        return {"a": {"href": None, "hreflang": None, "title": None, "target": None, "rel": None}}

    def set_environment(self, environment):
        environment.add_extension(_LinkMarkdownExtension(self))
