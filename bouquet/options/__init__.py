"""
Selectable recommendation options.

Responsibilities:
- Publish the occasion, recipient, mood and size choices the client
  offers when building a recommendation request.
"""
