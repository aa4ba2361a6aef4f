"""Unthink.

Backend service for Unthink, a social publishing platform where people write
essays, post short Sparks and Hot Takes, and record how their beliefs change
over time with Belief Cards.

High-level architecture
-----------------------

The codebase is organized around three layers:

- **Content rules**: pure functions that shape data without touching storage
  (tag normalization, comment threading, feed merging, duration parsing).
- **Persistence**: SQLModel entities and async repositories, one per table.
- **Server**: FastAPI routers backed by service objects that enforce ownership
  and validation, and call out to hosted collaborators.

Core subpackages
----------------

- ``unthink.content``: stateless content helpers.
- ``unthink.core``: configuration-free shared pieces (logging, monitoring,
  domain errors, database layer, I/O models).
- ``unthink.integrations``: HTTP clients for the hosted object storage and
  serverless functions (text-to-speech, newsletter delivery).
- ``unthink.server``: the FastAPI application.

Authentication, the relational database engine and object storage are hosted
services. This package verifies the access tokens the auth service issues and
talks to the other two over their public interfaces.
"""
