from .checker import QualityChecker
from .cleaner import Cleaner
from .client import TranslationClient
from .google import GoogleTranslator
from .provider import EchoTranslator, Provider
from .validator import ConfigValidator

__all__ = [
    "Cleaner",
    "ConfigValidator",
    "EchoTranslator",
    "GoogleTranslator",
    "Provider",
    "QualityChecker",
    "TranslationClient",
]
