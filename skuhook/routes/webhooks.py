# skuhook/routes/webhooks.py

from fastapi import APIRouter, Request, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from ..config import Settings
from ..errors import MalformedPayload, SignatureMismatch
from ..schemas import PurchaseEvent, WebhookResponse
from ..services.dispatcher import LineItemDispatcher
from ..utils.logging import logger
from ..utils.shopify import verify_shopify_hmac


router = APIRouter(prefix="/webhooks", tags=["webhooks"])

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_dispatcher(request: Request) -> LineItemDispatcher:
    return request.app.state.dispatcher

@router.post("/orders-create", response_model=WebhookResponse)
async def orders_create(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    dispatcher: LineItemDispatcher = Depends(get_dispatcher),
):
    raw = await request.body()
    hmac_hdr = request.headers.get("X-Shopify-Hmac-Sha256", "")
    shop_id = request.headers.get("X-Shopify-Shop-Domain", "unknown")
    event_id = request.headers.get("X-Shopify-Webhook-Id")

    # Verify HMAC before touching the body
    secret = settings.SHOPIFY_WEBHOOK_SECRET.get_secret_value()
    if not verify_shopify_hmac(raw, hmac_hdr, secret):
        logger.warning("Rejected webhook %s from %s: invalid HMAC", event_id, shop_id)
        raise SignatureMismatch("Invalid HMAC")

    try:
        event = PurchaseEvent.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Malformed webhook %s from %s: %s", event_id, shop_id, e.errors(include_url=False)[:3])
        raise MalformedPayload("Malformed payload") from e

    logger.info("Webhook %s (%s) from %s with %d line items",
                event_id, request.headers.get("X-Shopify-Topic", "orders/create"), shop_id, len(event.line_items))

    # catalog read and notifier may block
    result = await run_in_threadpool(dispatcher.dispatch, event.skus())
    return WebhookResponse(ok=True, matched=result.matched, checked=result.checked)
