"""
Stateless content rules.

Nothing in this package touches the database or the network; services call
these helpers to shape what they load and what they store.

Modules:
- tags: built-in topics, tag normalization and suggestions
- comment_tree: reply depth and flat-to-nested comment threading
- feed: timeline merging, tag filtering and trending topics
- durations: audio duration parsing/formatting and speech length estimates
- text: excerpts, blank handling and display formatting
"""
