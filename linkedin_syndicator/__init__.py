"""linkedin-syndicator: POSSE syndication of JF2 posts to LinkedIn.

Maps IndieWeb post properties onto LinkedIn notes and article cards,
uploads card thumbnails, and returns the LinkedIn permalink.
"""

__version__ = "0.1.0"

from linkedin_syndicator.client import AuthorIdentity, LinkedInAPIError, LinkedInClient, LinkedInConfig
from linkedin_syndicator.config import load_config, SyndicatorConfig
from linkedin_syndicator.factory import build_syndicator
from linkedin_syndicator.properties import PostProperties
from linkedin_syndicator.syndicator import LinkedInPoster, LinkedInSyndicator, SyndicationError

__all__ = [
    "AuthorIdentity",
    "LinkedInAPIError",
    "LinkedInClient",
    "LinkedInConfig",
    "load_config",
    "SyndicatorConfig",
    "build_syndicator",
    "PostProperties",
    "LinkedInPoster",
    "LinkedInSyndicator",
    "SyndicationError",
]
