TOOL_PLAN_PROMPT = """You are an expert technical architect and productivity consultant.

User Project Description: "{description}"
Category: {category}

Your Goal:
Generate a "Recommended Stack" consisting of curated tools grouped by functional categories required to complete this project.

1. **Project Summary**: 1-2 sentences clarifying the project.
2. **Grouped Tool Categories**: Create relevant groups based on the project needs.
   - Typical groups: Research, Ideation, Creation, Editing, Project Management, Deployment, Analytics, Growth.
   - **MANDATORY**: You MUST include an "Automation" group if applicable, or find tools that speed up the process.
   - For each group:
     - **Name**: e.g., "Content Creation", "Workflow Automation".
     - **Purpose**: One short sentence explaining why this group exists for this project.
     - **Tools**: Up to 5 high-quality, modern tools.
3. **Tool Details**: For EVERY tool, provide:
   - **Role**: One short sentence on what role it plays.
   - **URL**: Link to the home page.
   - **Instructions**:
      - *Setup*: 2-5 actionable setup steps.
      - *Usage*: 3-6 specific workflow steps for this project.

Return the response in strict JSON format.
"""


def build_tool_plan_prompt(description: str, category: str) -> str:
    return TOOL_PLAN_PROMPT.format(description=description, category=category)
