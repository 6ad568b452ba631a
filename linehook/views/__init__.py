"""Views module - exports all blueprints."""
from linehook.views.webhook import webhook_blueprint
from linehook.views.health import health_blueprint

__all__ = ["webhook_blueprint", "health_blueprint"]
