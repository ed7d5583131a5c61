from app.routes.blog import router as blog_router

__all__ = ["blog_router"]
