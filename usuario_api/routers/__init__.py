"""
FastAPI routers.

Routers only translate HTTP into service calls: wire models in, converters to
domain records, service Result back out as a response or an HTTPException.
"""
