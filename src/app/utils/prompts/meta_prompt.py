OPTIMIZED_PROMPT_HEADING = "## Optimized Prompt"
THOUGHT_PROCESS_HEADING = "## Brief Thought Process"
INPUT_CHECKLIST_HEADING = "## Input Checklist"

SECTION_HEADINGS = (
    OPTIMIZED_PROMPT_HEADING,
    THOUGHT_PROCESS_HEADING,
    INPUT_CHECKLIST_HEADING,
)

CONFLICT_RESOLUTION_ORDER = "hard_constraints > safety/compliance > success_criteria > tone/style"

# System message for the optimizer call itself, not for the target model.
OPTIMIZER_SYSTEM_PROMPT = "You are a meticulous assistant that follows the output contract exactly."

META_PROMPT_INTRO = (
    "You are an expert prompt engineer for multi-model LLMs. Your job is to transform the user's "
    "raw prompt and UI selections into a single, high-quality **Optimized Prompt** that consistently "
    "produces excellent results for the target model."
)

OUTPUT_CONTRACT = """## Output Contract (return EXACTLY these three H2 sections, in this order; no extra text)
{headings}""".strip()

OPTIMIZED_PROMPT_REQUIREMENTS = """
### Required contents of the Optimized Prompt section (in this order)
1) Role & Goal - Set the model's role for {domain} and state the goal in one crisp sentence.
2) Inputs You Will Receive - List the concrete inputs available for this task; do NOT restate the raw prompt verbatim.
3) Before You Start (Planning & Think Deeper) - Instruct the model to briefly decompose the task, surface ambiguities, plan steps and validate understanding. Add "Think deeper".
4) Process (do in order) -
   1. Decompose the request into core components.
   2. Ask up to 3 clarifying questions in one batch only if information is missing.
   3. Draft the solution.
   4. Validate against success criteria and constraints.
   5. Revise once, then finalize.
5) Output Format - {output_format}
6) Approach Summary (for the model's final answer) - Require the final answer to begin with 3-5 bullets summarizing the approach. No step-by-step internal reasoning or chain-of-thought; high-level rationale only.
7) Quality Rubric (internal, do not show scores) - The model must silently meet these criteria before responding:
   - Follows hard constraints
   - Meets success criteria (if provided)
   - Accuracy & relevance for {audience}
   - Clear, well-structured and scoped to the request
   - Tone & style = {tone} / {style}
   - Brevity aligned to a {length_band} response
   - Safety/compliance respected
   Iterate once internally until every criterion is "excellent".
8) Answer Parameters - Encode the settings explicitly so the model adheres:
   - Final answer length target: {length} tokens (do NOT expand reasoning)
   - Creativity (temperature): {creativity} ({creativity_band})
   - Focus guidance: {focus_level}. Keep to the brief; avoid tangents.{focus_extra}
   - Reasoning effort: {thinking_depth}
   - Tone/Style: {tone} / {style}
9) Conflict Resolution Rule - If instructions conflict: {conflict_order}. Apply and proceed.
10) Safety Line - If the request is disallowed or risky, briefly refuse and suggest compliant alternatives.
""".strip()

THOUGHT_PROCESS_REQUIREMENTS = """
### Requirements for the Brief Thought Process section (3-6 bullets)
Explain how you improved the user's raw prompt (structure, constraints, parameter mapping, target-model specifics). Do not include chain-of-thought; keep it descriptive and short.
""".strip()

INPUT_CHECKLIST_REQUIREMENTS = """
### Requirements for the Input Checklist section
List missing specifics that would improve results next time (e.g., audience seniority, length limits, examples, metrics, deadline, links).
""".strip()

STYLE_RULES = """
### Style & QA Rules
- Fix grammar/typos; never repeat the user's prompt verbatim in Role & Goal.
- Be explicit; avoid generic fluff.
- Do not produce the final deliverable itself. Produce the Optimized Prompt that instructs another model to produce it.
""".strip()

CLOSING_INSTRUCTION = """
---

Now produce exactly these sections, in this order, each under its H2 heading from the Output Contract above:
1. Optimized Prompt
2. Brief Thought Process
3. Input Checklist
""".strip()

ANALYZER_SYSTEM_PROMPT = (
    "You are an expert prompt engineer. Always respond with valid JSON only, "
    "no markdown formatting or additional text."
)

ANALYZER_PROMPT = """
You are an expert prompt engineer. Analyze the following raw prompt and suggest optimal form field values for a prompt optimization tool.

Raw prompt to analyze:
\"\"\"
{raw_prompt}
\"\"\"

Based on this prompt, suggest values for the following fields. Return your response as valid JSON.

Use Cases (choose the best match):
- content_creation (writing, editing, copywriting)
- analysis (research, data analysis, summarization)
- coding (programming, debugging, code review)
- creative (brainstorming, ideation, creative writing)
- education (learning, teaching, explanations)
- business (strategy, planning, proposals)
- communication (emails, messages, presentations)

Domains:
- technology, business, healthcare, education, finance, marketing, legal, creative, science, general

Tones:
- professional, casual, friendly, formal, authoritative, conversational, enthusiastic, neutral

Styles:
- clear, concise, detailed, creative, technical, persuasive, informative, engaging

Response format (JSON only, no markdown):
{{
  "use_case": "suggested_use_case",
  "task": "suggested_task",
  "domain": "suggested_domain",
  "audience": "target audience (e.g., 'developers', 'business executives', 'students')",
  "tone": "suggested_tone",
  "style": "suggested_style",
  "creativity": 0.7,
  "responseLengthTokens": 512,
  "focusLevel": "Standard",
  "thinkingDepth": "Standard",
  "format_requirements": "any specific format needs identified",
  "hard_constraints": "any constraints or requirements identified",
  "confidence_scores": {{
    "use_case": 0.85,
    "task": 0.75,
    "domain": 0.90
  }}
}}
""".strip()
