"""
Services Module
Business logic layer for the application.

The joke controller, its store gateway, aggregation helpers and permission
rules live here, next to authentication and error logging. Routers in
app.api.v1 stay thin and only translate HTTP to service calls.
"""
