from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from infrastructure.i18n import I18nError
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    DictionaryStoreDep,
    RequestLocaleDep,
    TranslatorDep,
)

logger = get_module_logger()
router = APIRouter(tags=["Locale"])


class TranslateRequest(BaseModel):
    text: str
    locale: Optional[str] = None
    identifier: Optional[str] = None
    force: bool = False


@router.get("/locale")
def get_request_locale(locale: RequestLocaleDep):
    """Locale negotiated for this request."""
    return {"locale": locale}


@router.get("/locales")
def get_locales(store: DictionaryStoreDep):
    """Loaded locale tags in load order."""
    return {"default": store.default_locale, "locales": list(store.locales)}


@router.post("/translate")
def translate(body: TranslateRequest, translator: TranslatorDep, locale: RequestLocaleDep):
    """Replace translation tokens in the submitted text.

    Uses the body's locale when given, the negotiated request locale otherwise.
    """
    target = body.locale or locale
    text = translator.process(
        body.text, target, identifier=body.identifier, force=body.force
    )
    return {"locale": translator.resolve_locale(target), "text": text}


@router.post("/locale/reload")
def reload_dictionaries(store: DictionaryStoreDep):
    """Re-scan every registered dictionary directory."""
    try:
        store.reload()
    except I18nError as e:
        logger.error("dictionary_reload_failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e
    return {"locales": list(store.locales), "paths": store.paths}
