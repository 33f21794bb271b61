import gradio as gr

from json_csv_flattener.config import DEFAULT_DELIMITER, DEFAULT_SEPARATOR
from json_csv_flattener.handlers import (
    export_csv_handler,
    export_headers_handler,
    load_dataset,
    load_schema,
    preview_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON to CSV Flattener") as demo:
    gr.Markdown("# JSON to CSV Flattener")
    gr.Markdown("Upload a nested JSON document and export it as a flat CSV table. Arrays of objects become rows.")

    # State
    json_data_state = gr.State()
    schema_state = gr.State()
    headers_schema_state = gr.State()

    with gr.Tab("Convert"):
        with gr.Row():
            # Left Panel: Input
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                file_input = gr.File(label="Upload JSON File", file_types=[".json"])
                status_msg = gr.Textbox(label="Status", interactive=False)

                gr.Markdown("### 2. Columns (optional)")
                gr.Markdown("Upload a schema JSON to fix the columns; otherwise they come from the data.")
                schema_input = gr.File(label="Upload Schema JSON", file_types=[".json"])
                schema_status = gr.Textbox(label="Schema Status", interactive=False)
                schema_headers = gr.Dataframe(
                    headers=["Column Path"],
                    datatype=["str"],
                    col_count=(1, "fixed"),
                    interactive=False,
                    label="Schema Columns",
                )

            # Right Panel: Output Builder
            with gr.Column(scale=1):
                gr.Markdown("### 3. Output Options")
                separator_input = gr.Textbox(label="Header Separator", value=DEFAULT_SEPARATOR)
                delimiter_input = gr.Textbox(label="CSV Delimiter", value=DEFAULT_DELIMITER, info="Use \\t for tab.")
                null_input = gr.Textbox(label="Empty Cell Text", value="")

                gr.Markdown("### 4. Export")
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
                load_preview_btn = gr.Button("Load Preview")
                export_btn = gr.Button("Export CSV", variant="primary")
                download_output = gr.File(label="Download Result")
                preview = gr.JSON(label="Preview (first 3 rows)")

        file_input.upload(
            fn=load_dataset,
            inputs=[file_input],
            outputs=[json_data_state, status_msg, preview],
        )

        schema_input.upload(
            fn=load_schema,
            inputs=[schema_input],
            outputs=[schema_state, schema_status, schema_headers],
        )

        schema_input.clear(
            fn=lambda: load_schema(None),
            inputs=[],
            outputs=[schema_state, schema_status, schema_headers],
        )

        load_preview_btn.click(
            fn=preview_handler,
            inputs=[json_data_state, schema_state, separator_input, delimiter_input, null_input],
            outputs=[preview],
        )

        export_btn.click(
            fn=export_csv_handler,
            inputs=[json_data_state, schema_state, separator_input, delimiter_input, null_input, output_filename],
            outputs=[download_output, status_msg],
        )

    with gr.Tab("Headers Only"):
        gr.Markdown("### 1. Upload a schema or sample document")
        with gr.Row():
            with gr.Column():
                headers_file = gr.File(label="Schema JSON", file_types=[".json"])
                headers_status = gr.Textbox(label="Status", interactive=False)
                headers_table = gr.Dataframe(
                    headers=["Column Path"],
                    datatype=["str"],
                    col_count=(1, "fixed"),
                    interactive=False,
                    label="Columns",
                )
            with gr.Column():
                gr.Markdown("### 2. Export")
                headers_separator = gr.Textbox(label="Header Separator", value=DEFAULT_SEPARATOR)
                headers_delimiter = gr.Textbox(label="CSV Delimiter", value=DEFAULT_DELIMITER)
                headers_filename = gr.Textbox(label="Output Filename (optional)", placeholder="headers")
                headers_btn = gr.Button("Export Headers", variant="primary")
                headers_download = gr.File(label="Download Result")

        headers_file.upload(
            fn=load_schema,
            inputs=[headers_file],
            outputs=[headers_schema_state, headers_status, headers_table],
        )

        headers_btn.click(
            fn=export_headers_handler,
            inputs=[headers_schema_state, headers_separator, headers_delimiter, headers_filename],
            outputs=[headers_download, headers_status],
        )

if __name__ == "__main__":
    demo.launch()
