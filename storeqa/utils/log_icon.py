icon = {
    "running": "🚀",
    "check": "✅",
    "cross": "❌",
    "retry": "🔁",
    "step": "👉",
    "warning": "⚠️",
    "report": "📄",
}
