MODEL_PROFILES = {
    "gpt-5": {
        "label": "GPT-5 (OpenAI)",
        "provider": "openai",
        "max_output_tokens": 16384,
        "system_role": "Very steerable; put the role in the system or opening instruction.",
        "sampling_tips": "Use temperature; top_p optional. Verbosity and 'reasoning effort' can be requested via instructions.",
        "structure_tips": "Be explicit: planning phase, short approach summary, internal quality rubric.",
        "safety_tips": "Avoid conflicting instructions; define precedence.",
        "do_nots": [],
    },
    "gpt-4o": {
        "label": "GPT-4o (OpenAI)",
        "provider": "openai",
        "max_output_tokens": 8192,
        "system_role": "Role can be set in a system message; follows style strongly.",
        "sampling_tips": "Temperature primarily; top_p optional.",
        "structure_tips": "Clear headings and output contract improve adherence.",
        "tool_calling_tips": "Describe each tool's purpose and arguments; ask for a tool call only when the answer needs it.",
        "do_nots": [],
    },
    "claude-sonnet-4": {
        "label": "Claude Sonnet 4",
        "provider": "claude",
        "max_output_tokens": 8192,
        "system_role": "Use a concise system role + explicit instructions.",
        "sampling_tips": "Adjust temperature OR top_p (not both).",
        "structure_tips": "JSON/structured format works well; explicit sections and constraints.",
        "safety_tips": "Prefer clarity; avoid contradictions.",
        "do_nots": ["Do not tune temperature and top_p simultaneously."],
    },
    "claude-opus-4": {
        "label": "Claude Opus 4",
        "provider": "claude",
        "max_output_tokens": 8192,
        "system_role": "Strong system instruction; keep tone explicit.",
        "sampling_tips": "Pick one: temperature or top_p.",
        "structure_tips": "Great with explicit constraints and review step.",
        "do_nots": ["Avoid simultaneous temp+top_p tuning."],
    },
    "gemini-1.5-pro": {
        "label": "Gemini 1.5 Pro",
        "provider": "gemini",
        "max_output_tokens": 8192,
        "system_role": "Use a 'system_instruction' concept; be direct and structured.",
        "sampling_tips": "Supports temperature and topP; topK sometimes; specify only those needed.",
        "structure_tips": "If strict JSON is needed, say 'response_mime_type: application/json'.",
        "do_nots": [],
    },
    "gemini-1.5-flash": {
        "label": "Gemini 1.5 Flash",
        "provider": "gemini",
        "max_output_tokens": 8192,
        "system_role": "Keep role concise; Flash favors brevity.",
        "sampling_tips": "Lower temperature for deterministic tasks.",
        "structure_tips": "Short, clearly-scoped instructions; fast results.",
        "do_nots": [],
    },
    "llama-3.1-405b-instruct": {
        "label": "Llama 3.1 405B Instruct",
        "provider": "llama",
        "max_output_tokens": 8192,
        "system_role": "Explicit role works well; detailed constraints help.",
        "sampling_tips": "Use temperature; top_p/top_k optional depending on host.",
        "structure_tips": "Clear formatting; discourage hallucinations via checks.",
        "do_nots": [],
    },
    "llama-3.1-70b-instruct": {
        "label": "Llama 3.1 70B Instruct",
        "provider": "llama",
        "max_output_tokens": 8192,
        "system_role": "Same as 405B with tighter scopes.",
        "sampling_tips": "Temperature primary; keep top_p stable unless expert.",
        "structure_tips": "Lists/tables improve fidelity.",
        "do_nots": [],
    },
    "llama-3.1-8b-instruct": {
        "label": "Llama 3.1 8B Instruct",
        "provider": "llama",
        "max_output_tokens": 8192,
        "system_role": "Be extra explicit; avoid long ambiguous tasks.",
        "sampling_tips": "Lower temperature for accuracy.",
        "structure_tips": "Shorter outputs; emphasize validation checklist.",
        "do_nots": [],
    },
    "mistral-large-2": {
        "label": "Mistral Large 2",
        "provider": "mistral",
        "max_output_tokens": 8192,
        "system_role": "Use a clear, direct role and constraints.",
        "sampling_tips": "Prefer adjusting temperature OR top_p; top_k optional.",
        "structure_tips": "Supports response_format for JSON; explicit steps help.",
        "do_nots": ["Don't push temp and top_p together unless expert."],
    },
    "command-r-plus": {
        "label": "Cohere Command R+",
        "provider": "cohere",
        "max_output_tokens": 4096,
        "system_role": "Preambles/system guidance help consistency.",
        "sampling_tips": "Temperature only for most use; structured outputs via cookbook-style prompts.",
        "structure_tips": "Be explicit about sections and evidence.",
        "do_nots": [],
    },
    "grok-4": {
        "label": "xAI Grok 4",
        "provider": "grok",
        "max_output_tokens": 8192,
        "system_role": "OpenAI-style prompt works; note if web/live search should be avoided.",
        "sampling_tips": "Temperature/top_p similar to OpenAI.",
        "structure_tips": "Ask for strict sections for reliable parsing.",
        "do_nots": [],
    },
}

# Used when the caller composes without a resolved profile (e.g. previews).
DEFAULT_PROFILE = {
    "label": "Generic LLM",
    "provider": "generic",
    "max_output_tokens": 4096,
    "system_role": "State the role and goal in the opening instruction.",
    "sampling_tips": "Moderate temperature; leave other sampling controls at their defaults.",
    "structure_tips": "Use clear headings, explicit constraints and an output contract.",
    "do_nots": [],
}
