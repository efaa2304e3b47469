from fastapi import APIRouter, Request

from products_api.controllers.products_controller import ProductsController
from products_api.integrations.clients.real_http.json_response_sink import JSONResponseSink

router = APIRouter()


@router.get("/products", tags=["Products"])
async def list_products(request: Request):
    sink = JSONResponseSink()
    ProductsController().list_products(request, sink)
    return sink.response
