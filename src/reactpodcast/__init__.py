"""reactpodcast - episode data service for the React Podcast site.

Fetches the show's episode list from the Simplecast API and serves it
as JSON for the documentation site.
"""

__version__ = "0.1.0"
