TONE_OPTIONS = [
    {"value": "professional", "label": "Professional"},
    {"value": "casual", "label": "Casual"},
    {"value": "friendly", "label": "Friendly"},
    {"value": "formal", "label": "Formal"},
    {"value": "conversational", "label": "Conversational"},
    {"value": "authoritative", "label": "Authoritative"},
    {"value": "playful", "label": "Playful"},
    {"value": "encouraging", "label": "Encouraging"},
    {"value": "direct", "label": "Direct"},
    {"value": "diplomatic", "label": "Diplomatic"},
    {"value": "enthusiastic", "label": "Enthusiastic"},
    {"value": "calm", "label": "Calm"},
    {"value": "neutral", "label": "Neutral"},
]

STYLE_OPTIONS = [
    {"value": "clear", "label": "Clear"},
    {"value": "concise", "label": "Concise"},
    {"value": "detailed", "label": "Detailed"},
    {"value": "creative", "label": "Creative"},
    {"value": "analytical", "label": "Analytical"},
    {"value": "narrative", "label": "Narrative"},
    {"value": "instructional", "label": "Instructional"},
    {"value": "persuasive", "label": "Persuasive"},
    {"value": "technical", "label": "Technical"},
    {"value": "simple", "label": "Simple"},
    {"value": "comprehensive", "label": "Comprehensive"},
    {"value": "step-by-step", "label": "Step-by-step"},
    {"value": "bullet-points", "label": "Bullet Points"},
    {"value": "informative", "label": "Informative"},
    {"value": "engaging", "label": "Engaging"},
]

FOCUS_LEVEL_OPTIONS = [
    {"value": "laser-focused", "label": "Laser-focused"},
    {"value": "high", "label": "High"},
    {"value": "focused", "label": "Focused"},
    {"value": "standard", "label": "Standard"},
    {"value": "broad", "label": "Broad"},
    {"value": "very-broad", "label": "Very Broad"},
]

# low/medium/high are the legacy reasoning_effort values.
THINKING_DEPTH_OPTIONS = [
    {"value": "low", "label": "Quick"},
    {"value": "standard", "label": "Standard"},
    {"value": "medium", "label": "Thoughtful"},
    {"value": "high", "label": "Deep Analysis"},
]

# Presets only; any length in [1, max_output_tokens] is accepted.
RESPONSE_LENGTH_OPTIONS = [
    {"value": 256, "label": "Short"},
    {"value": 512, "label": "Medium"},
    {"value": 1024, "label": "Long"},
    {"value": 2048, "label": "Very Long"},
]

FORM_OPTIONS = {
    "tone": TONE_OPTIONS,
    "style": STYLE_OPTIONS,
    "focus_level": FOCUS_LEVEL_OPTIONS,
    "thinking_depth": THINKING_DEPTH_OPTIONS,
    "response_length_tokens": RESPONSE_LENGTH_OPTIONS,
}
