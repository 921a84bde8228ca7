"""Simple two-language (en/es) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "NASA Compose",
        "es": "NASA Compose",
    },
    "top_bar_apod_title": {
        "en": "Astronomy Picture of the Day",
        "es": "Imagen astronómica del día",
    },
    "connection_problems": {
        "en": "There was a problem with the connection. Please try again later.",
        "es": "Hubo un problema con la conexión. Inténtalo de nuevo más tarde.",
    },
    "downloading_toast": {
        "en": "Downloading image...",
        "es": "Descargando imagen...",
    },
    "info": {
        "en": "Info",
        "es": "Info",
    },
    "label_date": {
        "en": "Date",
        "es": "Fecha",
    },
    "label_copyright": {
        "en": "Copyright",
        "es": "Copyright",
    },
    "btn_download": {
        "en": "Download Image",
        "es": "Descargar imagen",
    },
    "loading": {
        "en": "Loading",
        "es": "Cargando",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
