"""Core building blocks of the Sitecore Item Web API client."""
