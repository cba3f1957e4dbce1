"""Transport, rate-limit parsing and error types shared by all API clients."""
