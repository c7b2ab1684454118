from recgraph.api.routes import router

__all__ = ["router"]
