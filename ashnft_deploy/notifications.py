"""
Slack notifications for deployments
"""

import logging
from datetime import datetime
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class SlackNotifier:
    def __init__(self, webhook_url: Optional[str] = None):
        self.webhook_url = webhook_url

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def build_payload(self, message: str, color: str = "good") -> dict:
        return {
            "text": "🚀 AshNFT Deployment",
            "attachments": [
                {
                    "color": color,
                    "fields": [
                        {
                            "title": "Message",
                            "value": message,
                            "short": False
                        },
                        {
                            "title": "Time",
                            "value": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                            "short": True
                        }
                    ]
                }
            ]
        }

    async def send(self, message: str, color: str = "good") -> bool:
        """Send notification to Slack, returning whether it was delivered"""
        if not self.enabled:
            return False

        try:
            payload = self.build_payload(message, color)
            async with aiohttp.ClientSession() as session:
                async with session.post(self.webhook_url, json=payload) as response:
                    if response.status == 200:
                        logger.info("Slack notification sent successfully")
                        return True
                    logger.error(f"Failed to send Slack notification: {response.status}")
                    return False
        except Exception as e:
            logger.error(f"Error sending Slack notification: {e}")
            return False
