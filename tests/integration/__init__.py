"""
Integration tests for the review sentiment demo.

Run the full FastAPI app (TestClient) with the hosted inference API replaced
by an httpx.MockTransport.
"""
