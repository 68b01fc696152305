"""Error taxonomy for the extraction API.

Every error carries the HTTP status it maps to and a single-line,
user-facing message. Internal causes are logged, never put in ``message``.
"""


class ExtractionError(Exception):
    status_code = 500
    default_message = "Fehler beim Extrahieren der Immobiliendaten"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ExtractionError):
    status_code = 400
    default_message = "URL ist erforderlich"


class UnsupportedSite(ExtractionError):
    status_code = 400
    default_message = (
        "Diese Website wird noch nicht unterstützt. "
        "Unterstützte Websites: ImmobilienScout24, Immowelt"
    )


class Unprocessable(ExtractionError):
    status_code = 422
    default_message = "Kaufpreis konnte nicht extrahiert werden. Bitte überprüfen Sie die URL."


class FetchFailed(ExtractionError):
    status_code = 500
    default_message = (
        "Fehler beim Extrahieren der Daten. "
        "Die Website könnte nicht erreichbar sein oder Zugriff verweigern."
    )


class InternalError(ExtractionError):
    status_code = 500
