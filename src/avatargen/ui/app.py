"""Gradio UI for the Avatar Generator."""

import logging

import gradio as gr

from avatargen import __version__
from avatargen.core.config import config

from .components import CUSTOM_CSS, AvatarFormUI
from .handlers import generate_avatar, submit_avatar, tick_cooldown
from .models import GENERATE_LABEL, UIState
from .state import cleanup_ui_state

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    app = gr.Blocks(title="Avatar Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState(), delete_callback=cleanup_ui_state)

        gr.Markdown(
            """
            # Avatar Generator
            Fill in the details below to generate your personalized avatar.
            """
        )

        form = AvatarFormUI()

        with gr.Row():
            submit_btn = gr.Button(GENERATE_LABEL, variant="primary", scale=0, min_width=200)
            countdown_display = gr.Markdown(value="")

        image_preview = gr.HTML(value="")
        toast_display = gr.HTML(value="")

        # One-second tick for the cooldown readout and toast expiry
        timer = gr.Timer(value=1.0)

        status_outputs = [submit_btn, countdown_display, image_preview, toast_display]

        submit_btn.click(
            fn=submit_avatar,
            inputs=[*form.get_input_components(), ui_state],
            outputs=[
                *form.get_input_components(),
                *form.get_error_components(),
                *status_outputs,
                ui_state,
            ],
        ).then(
            fn=generate_avatar,
            inputs=[ui_state],
            outputs=[*status_outputs, ui_state],
            concurrency_limit=None,
        )

        timer.tick(
            fn=tick_cooldown,
            inputs=[ui_state],
            outputs=[submit_btn, countdown_display, toast_display, ui_state],
            concurrency_limit=None,
            show_progress="hidden",
        )

        gr.Markdown(
            f"""
            ---
            **Model:** {config.model_id} | **Version:** {__version__}
            """
        )

    return app, CUSTOM_CSS


def main():
    """Main entry point for the application."""
    logger.info("Starting Avatar Generator...")
    logger.info(f"Configuration: {config.model_dump()}")

    if not config.hf_token.get_secret_value():
        logger.warning("AVATARGEN_HF_TOKEN is not set; generation requests will fail")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
