class TranslationError(Exception):
    status_code = 500

    def __init__(self, error: str, status_code: int | None = None, **extra):
        super().__init__(error)
        self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def content(self) -> dict:
        return {"error": self.error, **self.extra}


class MissingWordError(TranslationError):
    status_code = 400

    def __init__(self):
        super().__init__("germanWord is required")


class ConfigurationError(TranslationError):
    def __init__(self):
        super().__init__("Server misconfiguration: API key missing")


class UpstreamTransportError(TranslationError):
    def __init__(self, status_code: int, details: str):
        super().__init__("Gemini API call failed", status_code=status_code, status=status_code, details=details)


class UpstreamShapeError(TranslationError):
    def __init__(self):
        super().__init__("Invalid response from Gemini API")


class PayloadParseError(TranslationError):
    def __init__(self, raw: str, error: str = "Failed to parse JSON from Gemini"):
        super().__init__(error, raw=raw)
