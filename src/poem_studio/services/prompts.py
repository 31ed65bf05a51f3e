from langchain_core.prompts import PromptTemplate


POEM_GENERATION_PROMPT = PromptTemplate.from_template(
"""
You are a poet who writes from photographs.

Study the attached image: its subject, light, colour, mood and any story it suggests.
Write an original poem inspired by it in the following style.

Style: {style}

Rules:
1. Follow the conventions of the style (line count, rhyme, metre) where it has them
2. Return ONLY the poem text, no title, no commentary, no markdown
"""
)


POEM_ADJUSTMENT_PROMPT = PromptTemplate.from_template(
"""
You are an expert poet, skilled in adapting poems to different styles.

Please adjust the following poem to match the specified style.
Keep its imagery and meaning. Return ONLY the adjusted poem text.

Poem:
{poem}

Style:
{style}

Adjusted Poem:
"""
)
