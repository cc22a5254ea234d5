"""Council CMS API package."""
