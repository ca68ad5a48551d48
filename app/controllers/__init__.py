from app.controllers.discord_controller import router as discord_router

__all__ = [
    "discord_router",
]
