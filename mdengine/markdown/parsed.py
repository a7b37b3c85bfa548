# mdengine/markdown/parsed.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedMarkdown:
    """
    Result of a single ``parse`` call.

    ``html`` has already been through the parser's render strategy, so it
    may be placed in a page as is unless that strategy is ``none``.
    Instances are immutable and can be cached.
    """

    raw_markdown: str
    html: str
    language: str | None = None

    @classmethod
    def create(cls, markdown: str, html: str, language: str | None = None) -> "ParsedMarkdown":
        return cls(raw_markdown=markdown or "", html=html or "", language=language)

    def __str__(self):
        return self.html

    def __html__(self):
        # Lets Django and Jinja templates output the value without escaping.
        return self.html

    def __len__(self):
        return len(self.html)
