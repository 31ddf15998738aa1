#!/usr/bin/env python3
"""
Gradio UI for the VRAM Calculator
Hugging Face Spaces deployment
"""
import gradio as gr
import pandas as pd

from .core.config import EstimatorConfig
from .core.estimator import MemoryEstimator
from .core.types import OperationMode, PrecisionMode

OPERATION_LABELS = {
    "Inference": OperationMode.INFERENCE,
    "Training": OperationMode.TRAINING,
    "Fine-tuning": OperationMode.FINE_TUNING,
}


def estimate_memory(model_name, precision, operation, batch_size, seq_len, offline):
    """Run VRAM estimation with given parameters."""
    model_name = (model_name or "").strip()
    if not model_name:
        return "## ❌ Missing Model\n\nPlease enter a model ID.", pd.DataFrame()

    # Run estimation (only wrap this critical section)
    try:
        cfg = EstimatorConfig(
            model=model_name,
            precision=precision,
            operation=OPERATION_LABELS.get(operation, OperationMode.INFERENCE),
            batch_size=batch_size,
            seq_len=seq_len,
            offline=bool(offline),
        )
        estimator = MemoryEstimator(cfg)
        result = estimator.estimate()
    except ValueError as e:
        error_msg = f"## ❌ Invalid Configuration\n\n{str(e)}\n\nPlease check your parameter values."
        return error_msg, pd.DataFrame()

    model_config = estimator.model_config
    total = result.total

    warning = ""
    if model_config.is_estimated:
        warning = (
            "\n> ⚠️ Could not load the model configuration. "
            "Using an estimate derived from the model name.\n"
        )

    summary = f"""
## 📊 VRAM Estimate
{warning}
### Model
- Model: `{model_config.model_id}`
- Parameters: `{model_config.params_billions:.2f}B` ({model_config.model_type or "unknown"})
- Config source: `{model_config.source.value}`

### Total Requirements
- **Typical Usage:** `{total.typical_gb:.1f} GB`
- **Realistic Range:** `{total.minimum_gb:.1f} - {total.maximum_gb:.1f} GB`
- **Safety Buffer:** `+{total.safety_buffer_gb:.1f} GB`
- **Safe Target:** `{total.safe_target_gb:.1f} GB`

### 🖥️ Recommended GPU
{result.recommended_gpu}

### Configuration
- Precision: `{cfg.precision.value}`, Operation: `{cfg.operation.value}`
- Batch: `{cfg.batch_size}`, Sequence: `{cfg.seq_len}`
"""

    return summary, result.to_dataframe()


# Create Gradio interface
with gr.Blocks(title="VRAM Calculator") as demo:
    gr.Markdown("""
    # 🧮 Transformer VRAM Calculator

    Estimate GPU memory requirements for running or training a transformer model.
    """)

    with gr.Row():
        with gr.Column():
            model_name = gr.Textbox(
                value="mistralai/Mistral-7B-v0.1",
                label="Model ID",
                info="HuggingFace model ID or any model name",
                placeholder="mistralai/Mistral-7B-v0.1"
            )
            precision = gr.Dropdown(
                choices=[m.value for m in PrecisionMode],
                value=PrecisionMode.FP16.value,
                label="Precision",
            )
            operation = gr.Radio(
                choices=list(OPERATION_LABELS),
                value="Inference",
                label="Operation",
            )

        with gr.Column():
            batch_size = gr.Number(
                value=1,
                label="Batch Size",
                precision=0,
                minimum=1
            )
            seq_len = gr.Number(
                value=2048,
                label="Sequence Length",
                precision=0,
                minimum=1
            )
            offline = gr.Checkbox(
                value=False,
                label="Offline",
                info="Skip fetching config.json; use known models or name heuristics"
            )

    calculate_btn = gr.Button("💾 Calculate VRAM", variant="primary")

    gr.Markdown("## Results")

    with gr.Row():
        with gr.Column(scale=1):
            summary_output = gr.Markdown(label="Summary")
        with gr.Column(scale=1):
            breakdown_output = gr.Dataframe(label="Detailed Breakdown", wrap=True)

    gr.Markdown("""
    ---
    ### 📝 Notes
    - **Estimates are approximate.** Real-world usage can vary by 2x or more.
    - Always test with actual workloads.
    """)

    calculate_btn.click(
        fn=estimate_memory,
        inputs=[model_name, precision, operation, batch_size, seq_len, offline],
        outputs=[summary_output, breakdown_output]
    )


def launch_app(**kwargs):
    """Launch the Gradio app.

    Args:
        **kwargs: Additional arguments to pass to demo.launch()
    """
    return demo.launch(**kwargs)


if __name__ == "__main__":
    demo.launch(server_name="0.0.0.0", server_port=7860, show_error=True)
