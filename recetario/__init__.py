"""The Recetario domain. Centres around the `Session`.

A recipe is whatever the language model hands back, split on `$` into a name,
an ingredient list and instructions. Everything else is plumbing around one
external call:

- build a Spanish prompt from the user's constraints,
- send it to a chat-completion api,
- parse the answer,
- remember it.

The model is an external service inside the domain. It is faked in the tests.
"""
