"""Gradio user interface for the Avatar Generator.

Modules
-------
app
    Blocks layout, event wiring and the ``main()`` entry point.
components
    The nine-field form and the HTML renders for preview, toast and countdown.
controller
    Submission lifecycle state machine.
handlers
    Gradio event handlers.
models
    Session state and form data models.
validation
    Per-field validation rules.
"""
