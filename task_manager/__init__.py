"""Task Management API: JWT-authenticated CRUD over per-user tasks."""
