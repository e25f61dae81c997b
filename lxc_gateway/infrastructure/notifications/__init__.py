from .embeds import failure_embed, success_embed
from .webhook import WebhookNotifier

__all__ = ["WebhookNotifier", "failure_embed", "success_embed"]
