"""
Unit tests for the review sentiment demo.

Test individual components in isolation:
- Corpus loader and sampler
- Inference client (httpx.MockTransport) and prompt builder
- Result interpreter and display rendering
- Presentation controller state machine
"""
