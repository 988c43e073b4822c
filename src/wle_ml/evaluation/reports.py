import json
from pathlib import Path

import pandas as pd

from wle_ml.domain.exercise import get_classe_description
from wle_ml.features.sensors import group_features_by_sensor

RULE = "=" * 60
SUBRULE = "-" * 40


def save_evaluation_report(metrics: dict, output_path: str | Path):
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(metrics, f, indent=2)


def _format_accuracy(lines: list[str], metrics: dict):
    lines.append(
        f"Accuracy: {metrics['accuracy']:.4f} "
        f"(95% CI {metrics['accuracy_ci_lower']:.4f}, {metrics['accuracy_ci_upper']:.4f})"
    )
    lines.append(f"Kappa: {metrics['kappa']:.4f}")
    lines.append(f"No information rate: {metrics['no_information_rate']:.4f}")


def format_predictions(predictions: pd.Series) -> list[str]:
    return [f"{index} {label}" for index, label in predictions.items()]


def format_report(result) -> str:
    """Render a pipeline result as the plain-text report printed by ``wle-ml run``."""
    model = result.model
    settings = result.settings
    lines = [RULE, "WEIGHT LIFTING EXERCISE CLASSIFICATION REPORT", RULE, ""]

    lines += ["DATA", SUBRULE]
    lines.append(f"Labeled rows after cleaning: {result.n_train + result.n_test}")
    lines.append(f"Training / held-out rows: {result.n_train} / {result.n_test}")
    lines.append(f"All-missing columns dropped: {len(result.cleaned.empty_columns)}")
    groups = group_features_by_sensor(result.cleaned.feature_columns)
    lines.append(f"Feature columns: {len(result.cleaned.feature_columns)}")
    for sensor, cols in groups.items():
        lines.append(f"  {sensor:<10}{len(cols)}")
    lines.append("")

    lines += ["MODEL", SUBRULE]
    lines.append(f"Random forest, {settings.n_estimators} trees, {settings.cv_folds}-fold cross-validation")
    lines.append(model.cv_results.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    lines.append(f"Selected max_features = {model.best_params_['max_features']}")
    lines.append("")
    lines.append("Top feature importances:")
    for i, (feature, importance) in enumerate(model.feature_importances(settings.top_importances).items(), 1):
        lines.append(f"{i:3}. {feature:<24}{importance:.4f}")
    lines.append("")

    lines += ["IN-SAMPLE PERFORMANCE", SUBRULE]
    _format_accuracy(lines, result.train_evaluation.metrics)
    lines.append("")

    test_metrics = result.test_evaluation.metrics
    lines += ["HELD-OUT PERFORMANCE", SUBRULE]
    _format_accuracy(lines, test_metrics)
    lines.append(f"Estimated out-of-sample error: {test_metrics['out_of_sample_error']:.4f}")
    lines.append("")
    lines.append("Confusion matrix:")
    lines.append(result.test_evaluation.confusion.to_string())
    lines.append("")
    per_class = pd.DataFrame(result.test_evaluation.class_metrics).T
    lines.append(per_class.to_string(float_format=lambda v: f"{v:.4f}"))
    lines.append("")

    lines += ["CLASSES", SUBRULE]
    for label in model.classes_:
        lines.append(f"{label}  {get_classe_description(label)}")
    lines.append("")

    lines += ["PREDICTIONS", SUBRULE]
    lines += format_predictions(result.predictions)

    return "\n".join(lines) + "\n"


def _markdown_confusion(confusion: dict) -> str:
    references = list(next(iter(confusion.values()), {}).keys())
    table = "| Prediction \\ Reference | " + " | ".join(references) + " |\n"
    table += "|---|" + "---|" * len(references) + "\n"
    for prediction, row in confusion.items():
        table += f"| {prediction} | " + " | ".join(str(row.get(ref, 0)) for ref in references) + " |\n"
    return table


def _markdown_per_class(per_class: dict) -> str:
    table = "| Class | Sensitivity | Specificity |\n|---|---|---|\n"
    for label, values in per_class.items():
        table += f"| {label} | {values.get('sensitivity', 0.0):.4f} | {values.get('specificity', 0.0):.4f} |\n"
    return table


def render_markdown_report(metrics: dict) -> str:
    report = "# Model Evaluation Report\n\n"
    for section, values in metrics.items():
        if section == "predictions" or not isinstance(values, dict):
            continue
        title = section.replace("_", " ").title()
        report += f"## {title}\n\n"
        for key, value in values.items():
            if isinstance(value, float):
                report += f"- **{key}**: {value:.4f}\n"
            elif isinstance(value, (int, str)):
                report += f"- **{key}**: {value}\n"
        report += "\n"
        if values.get("confusion_matrix"):
            report += f"### {title} Confusion Matrix\n\n" + _markdown_confusion(values["confusion_matrix"]) + "\n"
        if values.get("per_class"):
            report += f"### {title} Per-Class Metrics\n\n" + _markdown_per_class(values["per_class"]) + "\n"

    predictions = metrics.get("predictions")
    if predictions:
        report += "## Predictions\n\n| # | classe |\n|---|---|\n"
        for index, label in predictions.items():
            report += f"| {index} | {label} |\n"

    return report


def save_markdown_report(metrics: dict, output_path: str | Path):
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(render_markdown_report(metrics))
