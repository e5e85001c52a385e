CROP_CALENDAR_PROMPT = """
You are an expert Indian Agronomist. Generate a DENSE, detailed crop calendar with NO long gaps.

**Input:**
- Crop: {crop}
- Land: {land_acres} acres
- Sowing date: {sowing_date}
- Location: {location}{soil_context}

**Fill ALL gaps:**
- Never leave more than 3-4 days empty between tasks.
- Between land prep and sowing: seed preparation, seed treatment, final ploughing, field moisture check.
- Between sowing and first irrigation: germination check, gap filling, weed inspection.
- Between irrigations: soil moisture check, crop inspection, pest care.
- Create 50-80 tasks. Include land prep, seed prep, sowing, germination check, gap filling,
  irrigation (every 7-10 days), fertilizer splits, weeding rounds, pest monitoring, spray timing,
  harvest prep and harvest.

**Format:**
- dayFromSowing = days from sowing (negative = before sowing).
- stage: "Land prep" | "Sowing" | "Vegetative" | "Flowering" | "Fruiting" | "Harvest"
- quantityHint: scaled for {land_acres} acres.
- All text in {language_name}.

**Output:** Return ONLY valid JSON:
{{
  "tasks": [
    {{"dayFromSowing": -14, "stage": "Land prep", "title": "...", "description": "...", "quantityHint": "..."}},
    {{"dayFromSowing": -10, "stage": "Land prep", "title": "...", "description": "...", "quantityHint": "..."}}
  ]
}}
"""
