"""
Person works widget library code.

Fetches a person's combined TMDb credits and shapes them into the list a widget
host displays. Host entrypoints (the FastAPI app in `api/`, CLI scripts in
`scripts/`) import from `person_works` rather than the other way around.
"""
