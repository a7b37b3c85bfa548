# mdengine/markdown/guidelines.py
"""
Example documentation shown to authors.

Each group holds items with a title, an optional description and ``tags``:
a mapping of the HTML tag an example produces to one or more markdown
examples. ``strip_p`` False means the example output keeps its <p> wrapper.
"""


def default_guidelines(base_url: str, site_name: str) -> dict:
    guides = {
        "general": {"title": "General", "items": []},
        "blockquotes": {"title": "Block Quotes", "items": []},
        "code": {"title": "Code", "items": []},
        "headings": {"title": "Headings", "items": []},
        "images": {"title": "Images", "items": []},
        "links": {"title": "Links", "items": []},
        "lists": {"title": "Lists", "items": []},
    }

    guides["general"]["items"] += [
        {
            "title": "Paragraphs",
            "description": "Paragraphs are one or more consecutive lines of text, separated by one or more blank lines.",
            "strip_p": False,
            "tags": {"p": ["Paragraph one.\n\nParagraph two."]},
        },
        {
            "title": "Line Breaks",
            "description": "To insert a <br> break tag, end a line with two or more spaces, then type return.",
            "strip_p": False,
            "tags": {"br": ["Text with  \nline break"]},
        },
        {"title": "Horizontal Rule", "tags": {"hr": ["---", "___", "***"]}},
        {"title": "Emphasized text", "tags": {"em": ["_Emphasized_", "*Emphasized*"]}},
        {"title": "Strong text", "tags": {"strong": ["__Strong__", "**Strong**"]}},
    ]

    guides["blockquotes"]["items"].append(
        {
            "tags": {
                "blockquote": [
                    "> Block quoted\n\nNormal text",
                    "> Nested block quotes\n>> Nested block quotes\n>>> Nested block quotes\n\nNormal text",
                ]
            }
        }
    )

    guides["code"]["items"] += [
        {"title": "Inline code", "tags": {"code": ["`Inline code`"]}},
        {
            "title": "Fenced code blocks",
            "tags": {
                "pre": [
                    "```\nFenced code block\n```",
                    "~~~\nFenced code block\n~~~",
                    "    Code block - indented using 4+ spaces",
                ]
            },
        },
        {
            "title": "Fenced code blocks (using languages)",
            "tags": {
                "pre": [
                    "```css\n.selector {\n  color: #ff0;\n}\n```",
                    "```python\ndef hello(name):\n    return f\"Hello {name}\"\n```",
                ]
            },
        },
    ]

    guides["headings"]["items"].append(
        {"tags": {f"h{level}": [f"{'#' * level} Heading {level}"] for level in range(1, 7)}}
    )

    guides["images"]["items"] += [
        {"title": "Images", "tags": {"img": ['![Alt text](https://picsum.photos/400/200 "Title text")']}},
        {
            "title": "Referenced images",
            "strip_p": False,
            "tags": {
                "img": [
                    "Lorem ipsum dolor sit amet\n\n![Alt text]\n\n"
                    '[Alt text]: https://picsum.photos/400/200 "Title text"'
                ]
            },
        },
    ]

    guides["links"]["items"] += [
        {
            "title": "Links",
            "tags": {
                "a": [
                    f"<{base_url}>",
                    f"[{site_name}]({base_url})",
                    "<john.doe@example.com>",
                    f"[Email: {site_name}](mailto:john.doe@example.com)",
                ]
            },
        },
        {
            "title": "Referenced links",
            "description": "Link references are useful when the same link is used throughout a document.",
            "tags": {"a": [f'[{site_name}]\n\n[{site_name}]: {base_url} "My title"']},
        },
        {
            "title": "Fragments (anchors)",
            "tags": {"a": [f"[{site_name}]({base_url}#fragment)", f"[{site_name}](#element-id)"]},
        },
    ]

    guides["lists"]["items"] += [
        {
            "title": "Ordered lists",
            "tags": {
                "ol": [
                    "1. First item\n2. Second item\n3. Third item",
                    "1. All start with 1\n1. All start with 1\n1. Rendered with correct numbers",
                    "5. Start at fifth item\n6. Sixth item",
                ]
            },
        },
        {
            "title": "Unordered lists",
            "tags": {
                "ul": [
                    "- First item\n- Second item",
                    "* First item\n* Second item",
                    "+ First item\n+ Second item",
                ]
            },
        },
    ]

    return guides
