"""Localized user-facing messages.

Messages are keyed by the ``message_key`` carried on domain and interface
errors. The language is picked from the request's ``Accept-Language``
header, falling back to English for unknown languages and keys.
"""

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "commentstreams-api-error-generic": "An unexpected error occurred.",
        "commentstreams-api-error-invalid": "The request is invalid.",
        "commentstreams-api-error-notfound": "The requested item was not found.",
        "commentstreams-api-error-noactor": "You must be logged in to do that.",
        "commentstreams-api-error-post-permissions": "You do not have permission to post comments.",
        "commentstreams-api-error-post-parentpagedoesnotexist": "The comment you are replying to does not exist.",
        "commentstreams-api-error-post": "Your comment could not be saved.",
        "commentstreams-api-error-notacomment": "This page is not a comment.",
        "apierror-badtoken": "Invalid CSRF token.",
    },
    "de": {
        "commentstreams-api-error-generic": "Ein unerwarteter Fehler ist aufgetreten.",
        "commentstreams-api-error-invalid": "Die Anfrage ist ungültig.",
        "commentstreams-api-error-notfound": "Das angeforderte Objekt wurde nicht gefunden.",
        "commentstreams-api-error-noactor": "Dafür musst du angemeldet sein.",
        "commentstreams-api-error-post-permissions": "Du hast keine Berechtigung, Kommentare zu schreiben.",
        "commentstreams-api-error-post-parentpagedoesnotexist": "Der Kommentar, auf den du antwortest, existiert nicht.",
        "commentstreams-api-error-post": "Dein Kommentar konnte nicht gespeichert werden.",
        "commentstreams-api-error-notacomment": "Diese Seite ist kein Kommentar.",
        "apierror-badtoken": "Ungültiges CSRF-Token.",
    },
    "fr": {
        "commentstreams-api-error-generic": "Une erreur inattendue s'est produite.",
        "commentstreams-api-error-invalid": "La requête est invalide.",
        "commentstreams-api-error-notfound": "L'élément demandé est introuvable.",
        "commentstreams-api-error-noactor": "Vous devez être connecté pour faire cela.",
        "commentstreams-api-error-post-permissions": "Vous n'avez pas la permission de publier des commentaires.",
        "commentstreams-api-error-post-parentpagedoesnotexist": "Le commentaire auquel vous répondez n'existe pas.",
        "commentstreams-api-error-post": "Votre commentaire n'a pas pu être enregistré.",
        "commentstreams-api-error-notacomment": "Cette page n'est pas un commentaire.",
        "apierror-badtoken": "Jeton CSRF invalide.",
    },
}


def preferred_languages(accept_language: str | None) -> list[str]:
    """Parse an Accept-Language header into primary language tags by quality.

    Args:
        accept_language: Raw header value, e.g. ``"de-CH,de;q=0.9,en;q=0.5"``

    Returns:
        Lowercase primary tags, best first, without duplicates
    """
    if not accept_language:
        return []

    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, position, tag.split("-")[0]))

    languages: list[str] = []
    for _, _, language in sorted(weighted):
        if language not in languages:
            languages.append(language)
    return languages


def get_message(key: str, accept_language: str | None = None) -> str:
    """Return the localized text for a message key.

    Unknown keys are returned as-is so the caller still sees something
    identifiable.
    """
    for language in [*preferred_languages(accept_language), DEFAULT_LANGUAGE]:
        text = MESSAGES.get(language, {}).get(key)
        if text is not None:
            return text
    return key
