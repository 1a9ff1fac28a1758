from .models import TranslationRequest, TranslationResult, TranslationResponse, ErrorResponse, HealthResponse

__all__ = ['TranslationRequest', 'TranslationResult', 'TranslationResponse', 'ErrorResponse', 'HealthResponse']
