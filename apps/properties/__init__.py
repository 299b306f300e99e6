"""Properties app package.

This app encapsulates all functionality related to property listings:
the listing aggregate with its images and features, persistence,
reference checks against the agent, city and property type services,
and the REST API.
"""
