"""String preparation before markup is handed to libxml2."""

import re

# Anything outside the XML 1.0 Char production, lone surrogates included
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class StringHelper:
    """Helpers for raw document strings."""

    @staticmethod
    def safe_encode_str(text: str) -> str:
        """Remove characters libxml2 cannot store.

        Control characters, lone surrogates and U+FFFE/U+FFFF make the parser
        either fail or silently truncate the document, so they are dropped
        before the text is encoded to UTF-8.

        Args:
            text: Raw markup

        Returns:
            Markup that encodes to valid UTF-8 XML characters
        """
        return _INVALID_XML_CHARS.sub("", text)
