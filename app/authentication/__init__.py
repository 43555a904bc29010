"""
Authentication app.

This app provides:
- User: email-identified principal carrying an application role
- AccessGate: JWT authentication plus role authorization
- Token endpoints for obtaining and refreshing JWT pairs
"""
