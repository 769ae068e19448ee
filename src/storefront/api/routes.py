"""FastAPI routes for customer orders and the vendor console."""

import structlog
from fastapi import APIRouter, Depends, Request

from storefront.api.schemas import (
    CreateOrderRequest,
    MessageRequest,
    OrderIdSchema,
    OrderMessageSchema,
    OrderSchema,
    SentMessageSchema,
    UpdateStatusRequest,
    dump,
    success,
)
from storefront.order.lifecycle import OrderLifecycle
from storefront.order.stats import (
    customer_summary,
    order_stats_overview,
    vendor_analytics,
    vendor_dashboard,
)

logger = structlog.get_logger(__name__)


def get_lifecycle(request: Request) -> OrderLifecycle:
    return request.app.state.lifecycle


def _orders(orders) -> list[dict]:
    return [dump(OrderSchema.from_order(order)) for order in orders]


# ---------------------------------------------------------------------------
# Customer Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("")
async def list_orders(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching all orders")
    return success(_orders(lifecycle.list_orders()))


# Declared before /{order_id} so "stats" is not taken for an order id
@order_router.get("/stats/overview")
async def stats_overview(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching order stats overview")
    return success(order_stats_overview(lifecycle.list_orders()))


@order_router.get("/stats/summary")
async def stats_summary(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching storefront order summary")
    return success(customer_summary(lifecycle.list_orders()))


@order_router.get("/{order_id}")
async def get_order(order_id: str, lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching order", order_id=order_id)
    return success(dump(OrderSchema.from_order(lifecycle.get_order(order_id))))


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest, lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Creating order", customer_email=body.customer_email, items=len(body.items))
    order = lifecycle.create_order(
        customer_name=body.customer_name,
        customer_phone=body.customer_phone,
        customer_email=body.customer_email,
        customer_address=body.customer_address,
        delivery_time=body.delivery_time,
        items=[item.model_dump() for item in body.items],
        special_instructions=body.special_instructions,
    )
    return success(dump(OrderIdSchema(order_id=str(order.id))))


@order_router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    body: UpdateStatusRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
):
    logger.info("Updating order status", order_id=order_id, status=body.status)
    order = lifecycle.update_status(order_id, body.status, body.message)
    return success(dump(OrderSchema.from_order(order)))


@order_router.post("/{order_id}/messages")
async def add_order_message(
    order_id: str,
    body: MessageRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
):
    logger.info("Adding order message", order_id=order_id, message_type=body.type)
    message = lifecycle.append_message(order_id, body.type, body.content)
    return success(dump(OrderMessageSchema.from_message(message)))


# ---------------------------------------------------------------------------
# Vendor Router
# ---------------------------------------------------------------------------
vendor_router = APIRouter(prefix="/vendor", tags=["vendor"])


@vendor_router.get("/dashboard")
async def dashboard(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching vendor dashboard")
    return success(vendor_dashboard(lifecycle.list_orders()))


@vendor_router.get("/orders")
async def vendor_list_orders(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching all orders", view="vendor")
    return success(_orders(lifecycle.list_orders()))


@vendor_router.get("/orders/{order_id}")
async def vendor_get_order(order_id: str, lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching order", order_id=order_id, view="vendor")
    return success(dump(OrderSchema.from_order(lifecycle.get_order(order_id))))


@vendor_router.patch("/orders/{order_id}/status")
async def vendor_update_order_status(
    order_id: str,
    body: UpdateStatusRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
):
    logger.info("Updating order status", order_id=order_id, status=body.status, view="vendor")
    order = lifecycle.update_status(order_id, body.status, body.message)
    return success(dump(OrderSchema.from_order(order)))


@vendor_router.post("/orders/{order_id}/message")
async def vendor_send_message(
    order_id: str,
    body: MessageRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
):
    logger.info("Sending customer message", order_id=order_id, message_type=body.type)
    message, sent = lifecycle.send_message(order_id, body.type, body.content)
    return success(dump(SentMessageSchema(message_id=str(message.id), sent=sent)))


@vendor_router.get("/analytics")
async def analytics(lifecycle: OrderLifecycle = Depends(get_lifecycle)):
    logger.info("Fetching vendor analytics")
    return success(vendor_analytics(lifecycle.list_orders()))
