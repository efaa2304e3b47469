"""HTTP layer: FastAPI app and routers."""
