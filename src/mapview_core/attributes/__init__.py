from .importer import AttributeImporter, ImporterConfig, import_options, read_camera, read_margins
from .sources import MappingAttributeSource, XmlAttributeSource
from .units import parse_color, parse_dimension, to_pixels
from .operators import ImportOptionsOperator

__all__ = [
    "AttributeImporter",
    "ImporterConfig",
    "import_options",
    "read_camera",
    "read_margins",
    "MappingAttributeSource",
    "XmlAttributeSource",
    "parse_color",
    "parse_dimension",
    "to_pixels",
    "ImportOptionsOperator",
]
