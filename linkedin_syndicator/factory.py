"""Factory for building a LinkedInSyndicator from SyndicatorConfig.

Shared by the CLI and any host pipeline to avoid duplicated client
construction logic.
"""

from __future__ import annotations

from linkedin_syndicator.client import LinkedInClient, LinkedInConfig
from linkedin_syndicator.config import SyndicatorConfig
from linkedin_syndicator.syndicator import LinkedInPoster, LinkedInSyndicator


def build_syndicator(cfg: SyndicatorConfig) -> LinkedInSyndicator:
    """Build a LinkedInSyndicator from a SyndicatorConfig.

    Args:
        cfg: Syndicator configuration with the access token and live_mode.

    Returns:
        A fully wired LinkedInSyndicator.
    """
    client = LinkedInClient(
        LinkedInConfig(
            access_token=cfg.access_token,
            posts_api_version=cfg.posts_api_version,
        ),
        live=cfg.live_mode,
    )
    poster = LinkedInPoster(client, character_limit=cfg.character_limit)
    return LinkedInSyndicator(cfg, poster)
