from chat_input.config.loader import default_properties, load_properties
from chat_input.config.properties import PropertyLookup, PropertyStore

__all__ = ["PropertyLookup", "PropertyStore", "load_properties", "default_properties"]
