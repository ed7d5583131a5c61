from app.services.blog_analytics import compute_stats, search_blogs

__all__ = ["compute_stats", "search_blogs"]
