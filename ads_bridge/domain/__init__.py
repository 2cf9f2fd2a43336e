"""Domain layer for the ADS variable bridge.

This layer contains:
- Interfaces: Ports for the connection gateway and the event sink
- Value Objects: Type tokens, batch requests/responses, events
- Strategies: Scalar, array and struct codecs
- Entities: Request processing state

The domain layer depends only on the standard library and voluptuous.
"""
