"""
Localized prompt text for meal-plan generation.

Every fixed string the composer emits lives here, once per language, so a
prompt is always rendered in a single language. The JSON field names and
meal-type tags in OUTPUT_FORMAT are part of the data contract and stay in
English in both languages.
"""

SYSTEM_PROMPT = {
    "es": "Eres un nutricionista experto y chef profesional. Respondes únicamente con JSON válido.",
    "en": "You are an expert nutritionist and professional chef. You answer with valid JSON only.",
}

INTRO = {
    "es": (
        "Crea un plan de comidas personalizado de 7 días con {meals_per_day} comidas al día "
        "({meal_labels}). Escribe todo el contenido en español."
    ),
    "en": (
        "Create a personalized 7-day meal plan with {meals_per_day} meals per day "
        "({meal_labels}). Write all content in English."
    ),
}

MEAL_LABELS = {
    "es": {"breakfast": "desayuno", "lunch": "almuerzo", "dinner": "cena", "snack": "merienda"},
    "en": {"breakfast": "breakfast", "lunch": "lunch", "dinner": "dinner", "snack": "snack"},
}

# Section headers
HEADERS = {
    "es": {
        "profile": "## PERFIL DEL USUARIO",
        "constraints": "## RESTRICCIONES OBLIGATORIAS",
        "cooking": "## CÓMO COCINA",
        "taste": "## GUSTOS",
        "notes": "## NOTAS DEL USUARIO",
        "check_in": "## AJUSTES DE ESTA SEMANA",
        "variety": "## VARIEDAD",
        "output": "## FORMATO DE RESPUESTA",
    },
    "en": {
        "profile": "## USER PROFILE",
        "constraints": "## HARD CONSTRAINTS",
        "cooking": "## HOW THEY COOK",
        "taste": "## TASTE",
        "notes": "## USER NOTES",
        "check_in": "## THIS WEEK'S ADJUSTMENTS",
        "variety": "## VARIETY",
        "output": "## OUTPUT FORMAT",
    },
}

# Profile / constraint line labels
LABELS = {
    "es": {
        "goal": "Objetivo",
        "diet_type": "Tipo de dieta",
        "activity_level": "Nivel de actividad",
        "age": "Edad",
        "gender": "Género",
        "weight": "Peso (kg)",
        "allergies": "Alergias (NUNCA incluir estos ingredientes)",
        "no_allergies": "Sin alergias conocidas",
        "dislikes": "Alimentos que no le gustan (evitar)",
        "cooking_skill": "Nivel de cocina",
        "cooking_time": "Tiempo máximo de cocina por comida: {minutes} minutos",
        "budget": "Presupuesto",
        "servings": "Raciones por comida: {servings}",
        "meal_complexity": "Complejidad de las recetas",
        "flavor_preferences": "Sabores preferidos",
        "preferred_cuisines": "Cocinas preferidas",
    },
    "en": {
        "goal": "Goal",
        "diet_type": "Diet type",
        "activity_level": "Activity level",
        "age": "Age",
        "gender": "Gender",
        "weight": "Weight (kg)",
        "allergies": "Allergies (NEVER include these ingredients)",
        "no_allergies": "No known allergies",
        "dislikes": "Disliked foods (avoid)",
        "cooking_skill": "Cooking skill",
        "cooking_time": "Maximum cooking time per meal: {minutes} minutes",
        "budget": "Budget",
        "servings": "Servings per meal: {servings}",
        "meal_complexity": "Recipe complexity",
        "flavor_preferences": "Preferred flavors",
        "preferred_cuisines": "Preferred cuisines",
    },
}

# Weekly check-in directives
CHECK_IN_DIRECTIVES = {
    "es": {
        "weight_up": (
            "El usuario ha subido de peso esta semana: reduce ligeramente las calorías y los "
            "carbohidratos, y prioriza proteínas magras y verduras."
        ),
        "weight_down": (
            "El usuario ha bajado de peso esta semana: mantén el balance calórico actual y "
            "ofrece mucha variedad."
        ),
        "weight_same": "El peso del usuario se mantiene estable: conserva el enfoque actual.",
        "energy_low": (
            "El usuario tiene poca energía: aumenta los carbohidratos complejos e incluye "
            "alimentos ricos en hierro y vitamina B12."
        ),
        "energy_high": "El usuario tiene mucha energía: mantén el balance de macronutrientes actual.",
        "cheaper": "Prioriza ingredientes económicos y de temporada; limita el coste de cada receta.",
        "faster": "Todas las recetas deben prepararse en menos de 20 minutos.",
        "more_protein": "Aumenta la proporción de proteína en cada comida.",
        "healthier": "Elige preparaciones más saludables: menos fritos, más alimentos integrales.",
        "more_varied": "Maximiza la variedad de ingredientes y técnicas a lo largo de la semana.",
        "different": "Propón recetas claramente distintas a las habituales.",
        "custom": "Petición del usuario: {text}",
        "available": "El usuario ya tiene estos ingredientes, incorpóralos en el plan: {text}",
    },
    "en": {
        "weight_up": (
            "The user gained weight this week: slightly reduce calories and carbohydrates, and "
            "favor lean protein and vegetables."
        ),
        "weight_down": (
            "The user lost weight this week: keep the current caloric balance and offer plenty "
            "of variety."
        ),
        "weight_same": "The user's weight is stable: keep the current approach.",
        "energy_low": (
            "The user has low energy: increase complex carbohydrates and include foods rich in "
            "iron and vitamin B12."
        ),
        "energy_high": "The user has high energy: keep the current macronutrient balance.",
        "cheaper": "Favor inexpensive, seasonal ingredients; cap the cost of every recipe.",
        "faster": "Every recipe must take less than 20 minutes to prepare.",
        "more_protein": "Increase the share of protein in every meal.",
        "healthier": "Choose healthier preparations: less frying, more whole foods.",
        "more_varied": "Maximize variety of ingredients and techniques across the week.",
        "different": "Propose recipes clearly different from the usual ones.",
        "custom": "User request: {text}",
        "available": "The user already has these ingredients, use them in the plan: {text}",
    },
}

# Order in which tag directives are emitted
CHECK_IN_TAGS = ("cheaper", "faster", "more_protein", "healthier", "more_varied", "different")

THEMES = {
    "es": (
        "sabores mediterráneos",
        "platos de inspiración asiática",
        "comida reconfortante en versión saludable",
        "productos frescos de temporada",
        "clásicos latinoamericanos",
        "comidas rápidas en una sola sartén",
    ),
    "en": (
        "Mediterranean flavors",
        "Asian-inspired dishes",
        "healthy takes on comfort food",
        "fresh seasonal produce",
        "Latin American classics",
        "quick one-pan meals",
    ),
}

VARIETY = {
    "es": (
        "- Variación nº {seed}. Tema sugerido para esta semana: {theme}.\n"
        "- No repitas recetas de planes anteriores y no repitas ninguna receta dentro de este plan.\n"
        "- Sé creativo: evita las recetas más típicas y previsibles."
    ),
    "en": (
        "- Variation #{seed}. Suggested theme for this week: {theme}.\n"
        "- Do not repeat recipes from previous plans and do not repeat any recipe within this plan.\n"
        "- Be creative: avoid the most typical, predictable recipes."
    ),
}

OUTPUT_FORMAT = {
    "es": """\
Responde SOLO con JSON válido, sin texto adicional, con esta estructura exacta:
{{
  "meals": [
    {{
      "day_of_week": 0,
      "meal_type": "breakfast",
      "name": "Nombre de la receta",
      "description": "Descripción breve y apetecible",
      "ingredients": ["ingrediente con cantidad", "..."],
      "steps": ["paso 1", "paso 2", "..."],
      "calories": 400,
      "protein": 25,
      "carbs": 45,
      "fats": 12,
      "benefits": "Beneficios nutricionales de esta comida"
    }}
  ],
  "shopping_list": ["ingrediente con cantidad total", "..."]
}}

Reglas:
- Exactamente {total_meals} comidas: {meals_per_day} por día durante 7 días.
- "day_of_week" es un número de 0 (lunes) a 6 (domingo).
- "meal_type" es uno de: {meal_types}. Usa estas etiquetas tal cual.
- "calories", "protein", "carbs" y "fats" son números enteros (macros en gramos).
- "shopping_list" es una lista plana con todos los ingredientes de la semana.""",
    "en": """\
Respond ONLY with valid JSON, no extra text, with this exact structure:
{{
  "meals": [
    {{
      "day_of_week": 0,
      "meal_type": "breakfast",
      "name": "Recipe name",
      "description": "Short, appetizing description",
      "ingredients": ["ingredient with quantity", "..."],
      "steps": ["step 1", "step 2", "..."],
      "calories": 400,
      "protein": 25,
      "carbs": 45,
      "fats": 12,
      "benefits": "Nutritional benefits of this meal"
    }}
  ],
  "shopping_list": ["ingredient with total quantity", "..."]
}}

Rules:
- Exactly {total_meals} meals: {meals_per_day} per day for 7 days.
- "day_of_week" is a number from 0 (Monday) to 6 (Sunday).
- "meal_type" is one of: {meal_types}. Use these tags verbatim.
- "calories", "protein", "carbs" and "fats" are whole numbers (macros in grams).
- "shopping_list" is a flat list of every ingredient for the week.""",
}

# Image prompts are always English; image models follow English best.
IMAGE_PROMPT = (
    "Professional food photography of {name}: {description}. "
    "Appetizing, natural light, top-down view on a rustic table, no text, no people."
)
