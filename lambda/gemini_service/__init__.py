from .gemini import translate_word, build_payload, call_gemini, extract_generated_text, parse_translation, RESPONSE_SCHEMA
from .errors import TranslationError, MissingWordError, ConfigurationError, UpstreamTransportError, UpstreamShapeError, PayloadParseError

__all__ = ['translate_word', 'build_payload', 'call_gemini', 'extract_generated_text', 'parse_translation', 'RESPONSE_SCHEMA',
           'TranslationError', 'MissingWordError', 'ConfigurationError', 'UpstreamTransportError', 'UpstreamShapeError', 'PayloadParseError']
