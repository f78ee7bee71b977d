"""Element class registered for every element of a loaded document."""

from lxml import etree


class Element(etree.ElementBase):
    """Document element with helpers on top of the lxml API.

    lxml proxies are recreated on access, so this class must stay
    stateless (no ``__init__`` and no instance attributes).
    """

    def get_attributes(self) -> dict[str, str]:
        """Get all attributes of the element.

        Returns:
            Mapping of attribute name to value
        """
        return {str(name): str(value) for name, value in self.attrib.items()}
