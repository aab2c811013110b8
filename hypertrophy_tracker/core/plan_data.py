"""Static plan content: the 5-day hypertrophy plan, the 14-day vacation plan
and the default supplement reminders.

Loaded into the database by ``services.seed``; read-only at runtime.
Each exercise tuple is (name, sets, reps, rir, notes, is_superset) for the
main plan and (name, sets, reps, rir, equipment) for the vacation plan.
"""

from typing import TypedDict


class PlanDay(TypedDict):
    day_number: int
    day_name: str
    focus: str
    exercises: list[tuple[str, int, str, str, str, bool]]


class VacationDay(TypedDict):
    day_number: int
    day_name: str
    focus: str
    difficulty: str
    exercises: list[tuple[str, int, str, str, str]]


class DefaultReminder(TypedDict):
    slug: str
    time: str
    supplement: str
    dose: str


# ── Main plan: Push / Pull / Legs / Upper / Lower ──
HYPERTROPHY_PLAN: list[PlanDay] = [
    {
        "day_number": 1,
        "day_name": "Push (Pectoral y HSPU)",
        "focus": "Pectoral, Hombro, Tríceps",
        "exercises": [
            ("Progresión de Planche (Habilidad)", 3, "5-10 seg", "1-2", "Hacer primero. Tuck Planche o Pica con pies elevados. (10 min)", False),
            ("Press de Banca Inclinado", 3, "6-8", "1-2", "Énfasis en el pectoral superior. Descanso 90-120s.", False),
            ("Press Militar con Mancuernas", 3, "8-10", "2", "Hombro anterior y medio. Descanso 90-120s.", False),
            ("SS: Aperturas en Polea", 3, "12-15", "1", "SS: Pectoral y Hombro Medio (V-Taper). Descanso 60s.", True),
            ("SS: Elevaciones Laterales", 3, "12-15", "1", "SS: Pectoral y Hombro Medio (V-Taper). Descanso 60s.", True),
            ("SS: Extensión de Tríceps en Polea", 3, "10-12", "1", "SS: Tríceps. Descanso 60s.", True),
            ("SS: Press Francés", 3, "10-12", "1", "SS: Tríceps. Descanso 60s.", True),
            ("HSPU Progresión", 3, "5-8", "1-2", "HSPU (Pica con pies elevados o asistida). Descanso 60s.", False),
        ],
    },
    {
        "day_number": 2,
        "day_name": "Pull (Espalda y Dominadas)",
        "focus": "Espalda, Bíceps, Trapecio",
        "exercises": [
            ("Progresión de Front Lever (Habilidad)", 3, "5-10 seg", "1-2", "Hacer primero. Tuck Front Lever o Negativas. (10 min)", False),
            ("Remo con Barra (Pendlay)", 3, "6-8", "1-2", "Espalda media y grosor. Descanso 90-120s.", False),
            ("Jalón al Pecho (Agarre Ancho)", 3, "8-10", "2", "Énfasis en el dorsal ancho (V-Taper). Descanso 90-120s.", False),
            ("SS: Remo en Máquina", 3, "10-12", "1", "SS: Espalda media y Hombro Posterior. Descanso 60s.", True),
            ("SS: Face Pulls", 3, "10-12", "1", "SS: Espalda media y Hombro Posterior. Descanso 60s.", True),
            ("SS: Curl de Bíceps con Barra Z", 3, "8-12", "1", "SS: Bíceps y Braquial. Descanso 60s.", True),
            ("SS: Curl Martillo", 3, "8-12", "1", "SS: Bíceps y Braquial. Descanso 60s.", True),
            ("Dominadas con Lastre", 3, "5-8", "1-2", "Dominadas (Progresión de fuerza). Descanso 60s.", False),
        ],
    },
    {
        "day_number": 3,
        "day_name": "Legs (Cuádriceps)",
        "focus": "Cuádriceps, Femorales, Gemelos",
        "exercises": [
            ("Sentadilla con Barra", 3, "6-8", "1-2", "Movimiento principal. Profundidad controlada. Descanso 120-180s.", False),
            ("Prensa de Piernas", 3, "10-12", "1", "Énfasis en el cuádriceps. Pies bajos. Descanso 90-120s.", False),
            ("SS: Extensión de Cuádriceps", 3, "12-20", "0-1", "SS: Cuádriceps y Femorales. Descanso 60s.", True),
            ("SS: Curl Femoral Sentado", 3, "12-20", "0-1", "SS: Cuádriceps y Femorales. Descanso 60s.", True),
            ("Peso Muerto Rumano", 3, "8-10", "1", "Femorales y glúteos. Énfasis en el estiramiento. Descanso 90-120s.", False),
            ("SS: Elevación de Gemelos Sentado", 3, "15-20", "1", "SS: Gemelos y Core. Descanso 60s.", True),
            ("SS: Rueda Abdominal", 3, "15-20", "1", "SS: Gemelos y Core. Descanso 60s.", True),
        ],
    },
    {
        "day_number": 4,
        "day_name": "Upper (Volumen)",
        "focus": "Pectoral, Espalda, Hombro, Brazos",
        "exercises": [
            ("Progresión de L-Sit (Habilidad)", 3, "10-15 seg", "1-2", "Hacer primero. L-Sit en paralelas o suelo. (10 min)", False),
            ("Press de Banca Plano con Mancuernas", 3, "8-10", "1", "Pectoral general. Descanso 90-120s.", False),
            ("Remo con Mancuerna a una Mano", 3, "10-12", "1", "Espalda media y dorsal. Descanso 90-120s.", False),
            ("SS: Press Inclinado en Máquina", 3, "10-15", "1", "SS: Pectoral superior y Dorsal. Descanso 60s.", True),
            ("SS: Jalón al Pecho", 3, "10-15", "1", "SS: Pectoral superior y Dorsal. Descanso 60s.", True),
            ("SS: Curl de Bíceps en Banco Predicador", 3, "10-15", "1", "SS: Brazos. Descanso 60s.", True),
            ("SS: Extensión de Tríceps", 3, "10-15", "1", "SS: Brazos. Descanso 60s.", True),
            ("Elevaciones Laterales en Polea", 3, "15-20", "0", "Al fallo. Hombro medio (V-Taper). Descanso 60s.", False),
        ],
    },
    {
        "day_number": 5,
        "day_name": "Lower (Femorales)",
        "focus": "Femorales, Cuádriceps, Glúteos",
        "exercises": [
            ("Peso Muerto Convencional", 3, "5-8", "1-2", "Movimiento principal. Femorales y glúteos. Descanso 120-180s.", False),
            ("Zancadas con Mancuernas", 3, "10-12", "1", "Cuádriceps y glúteos. Descanso 90-120s.", False),
            ("SS: Curl Femoral Tumbado", 3, "10-15", "1", "SS: Femorales y Cuádriceps. Descanso 60s.", True),
            ("SS: Extensión de Cuádriceps", 3, "10-15", "1", "SS: Femorales y Cuádriceps. Descanso 60s.", True),
            ("Hip Thrust (Empuje de Cadera)", 3, "15-20", "1", "Glúteos. Descanso 90-120s.", False),
            ("SS: Elevación de Gemelos de Pie", 3, "15-20", "1", "SS: Gemelos y Core. Descanso 60s.", True),
            ("SS: Elevación de Piernas Colgado", 3, "15-20", "1", "SS: Gemelos y Core. Descanso 60s.", True),
        ],
    },
]

# ── Vacation plan: bodyweight / household equipment ──
VACATION_PLAN: list[VacationDay] = [
    {
        "day_number": 1,
        "day_name": "Día 1: Push en Casa",
        "focus": "Pectoral, Hombro, Tríceps",
        "difficulty": "moderado",
        "exercises": [
            ("Flexiones (Push-ups)", 4, "12-15", "2", "Peso corporal"),
            ("Flexiones Diamante", 3, "8-12", "2", "Peso corporal"),
            ("Pike Push-ups", 3, "10-12", "2", "Peso corporal"),
            ("Fondos en Silla", 3, "10-15", "2", "Silla"),
            ("Flexiones Inclinadas", 3, "12-15", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 2,
        "day_name": "Día 2: Pull en Casa",
        "focus": "Espalda, Bíceps",
        "difficulty": "moderado",
        "exercises": [
            ("Dominadas (o Flexiones Invertidas)", 4, "8-12", "2", "Barra o Puerta"),
            ("Flexiones Invertidas en Silla", 3, "10-15", "2", "Silla"),
            ("Remo Invertido", 3, "10-12", "2", "Barra o Puerta"),
            ("Curl de Bíceps con Botellas", 3, "12-15", "1", "Botellas de agua"),
        ],
    },
    {
        "day_number": 3,
        "day_name": "Día 3: Descanso Activo",
        "focus": "Movilidad y Flexibilidad",
        "difficulty": "fácil",
        "exercises": [
            ("Caminata Ligera", 1, "30 min", "1", "Peso corporal"),
            ("Estiramientos Dinámicos", 1, "15 min", "1", "Peso corporal"),
            ("Yoga Ligero", 1, "20 min", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 4,
        "day_name": "Día 4: Piernas en Casa",
        "focus": "Cuádriceps, Glúteos, Isquiotibiales",
        "difficulty": "difícil",
        "exercises": [
            ("Sentadillas Corporales", 4, "15-20", "2", "Peso corporal"),
            ("Sentadillas Búlgaras", 3, "12-15", "2", "Silla"),
            ("Estocadas", 3, "12-15 c/pierna", "2", "Peso corporal"),
            ("Puente de Glúteos", 3, "15-20", "1", "Peso corporal"),
            ("Elevaciones de Pantorrilla", 3, "20-25", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 5,
        "day_name": "Día 5: Push Volumen",
        "focus": "Pectoral, Hombro, Tríceps (Mayor Volumen)",
        "difficulty": "difícil",
        "exercises": [
            ("Flexiones Amplias", 4, "12-15", "2", "Peso corporal"),
            ("Flexiones Cerradas", 3, "10-12", "2", "Peso corporal"),
            ("Flexiones Explosivas", 3, "8-10", "2", "Peso corporal"),
            ("Fondos Profundos", 3, "8-12", "2", "Silla"),
            ("Planchas", 3, "45-60 seg", "2", "Peso corporal"),
        ],
    },
    {
        "day_number": 6,
        "day_name": "Día 6: Pull Volumen",
        "focus": "Espalda, Bíceps (Mayor Volumen)",
        "difficulty": "difícil",
        "exercises": [
            ("Dominadas Amplias", 4, "6-10", "2", "Barra o Puerta"),
            ("Dominadas Cerradas", 3, "8-12", "2", "Barra o Puerta"),
            ("Remo Invertido Profundo", 3, "8-12", "2", "Barra o Puerta"),
            ("Curl Concentrado con Botellas", 3, "12-15", "1", "Botellas de agua"),
            ("Planchas Invertidas", 3, "30-45 seg", "2", "Peso corporal"),
        ],
    },
    {
        "day_number": 7,
        "day_name": "Día 7: Descanso Completo",
        "focus": "Recuperación Total",
        "difficulty": "fácil",
        "exercises": [
            ("Descanso Activo Ligero", 1, "Según se sienta", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 8,
        "day_name": "Día 8: Push Explosivo",
        "focus": "Potencia en Pecho y Hombro",
        "difficulty": "difícil",
        "exercises": [
            ("Flexiones Clapping", 3, "5-8", "3", "Peso corporal"),
            ("Flexiones Explosivas", 3, "8-10", "2", "Peso corporal"),
            ("Pike Push-ups Explosivos", 3, "6-8", "2", "Peso corporal"),
            ("Fondos Explosivos", 3, "6-10", "2", "Silla"),
            ("Flexiones Inclinadas Rápidas", 3, "15-20", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 9,
        "day_name": "Día 9: Pull Explosivo",
        "focus": "Potencia en Espalda y Bíceps",
        "difficulty": "difícil",
        "exercises": [
            ("Dominadas Explosivas", 3, "5-8", "3", "Barra o Puerta"),
            ("Remo Invertido Explosivo", 3, "8-10", "2", "Barra o Puerta"),
            ("Flexiones Invertidas Rápidas", 3, "12-15", "1", "Silla"),
            ("Curl Explosivo con Botellas", 3, "10-12", "2", "Botellas de agua"),
        ],
    },
    {
        "day_number": 10,
        "day_name": "Día 10: Piernas Explosivas",
        "focus": "Potencia en Piernas",
        "difficulty": "difícil",
        "exercises": [
            ("Sentadillas Explosivas", 4, "8-12", "2", "Peso corporal"),
            ("Saltos Profundos", 3, "8-10", "2", "Peso corporal"),
            ("Estocadas Explosivas", 3, "10-12 c/pierna", "2", "Peso corporal"),
            ("Puente Explosivo de Glúteos", 3, "12-15", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 11,
        "day_name": "Día 11: Descanso Activo",
        "focus": "Recuperación y Movilidad",
        "difficulty": "fácil",
        "exercises": [
            ("Caminata Moderada", 1, "45 min", "1", "Peso corporal"),
            ("Estiramientos Profundos", 1, "20 min", "1", "Peso corporal"),
        ],
    },
    {
        "day_number": 12,
        "day_name": "Día 12: Push Resistencia",
        "focus": "Resistencia Muscular en Push",
        "difficulty": "moderado",
        "exercises": [
            ("Flexiones Lentas", 4, "12-15 (3 seg bajada)", "1", "Peso corporal"),
            ("Flexiones Diamante Lentas", 3, "10-12 (3 seg bajada)", "1", "Peso corporal"),
            ("Pike Push-ups Lentos", 3, "10-12 (3 seg bajada)", "1", "Peso corporal"),
            ("Fondos Lentos", 3, "10-15 (3 seg bajada)", "1", "Silla"),
        ],
    },
    {
        "day_number": 13,
        "day_name": "Día 13: Pull Resistencia",
        "focus": "Resistencia Muscular en Pull",
        "difficulty": "moderado",
        "exercises": [
            ("Dominadas Lentas", 4, "8-12 (3 seg bajada)", "1", "Barra o Puerta"),
            ("Remo Invertido Lento", 3, "10-12 (3 seg bajada)", "1", "Barra o Puerta"),
            ("Flexiones Invertidas Lentas", 3, "10-15 (3 seg bajada)", "1", "Silla"),
            ("Curl Lento con Botellas", 3, "12-15 (3 seg bajada)", "1", "Botellas de agua"),
        ],
    },
    {
        "day_number": 14,
        "day_name": "Día 14: Cuerpo Completo Ligero",
        "focus": "Recuperación y Mantenimiento",
        "difficulty": "fácil",
        "exercises": [
            ("Flexiones Ligeras", 2, "10-12", "3", "Peso corporal"),
            ("Sentadillas Ligeras", 2, "15-20", "3", "Peso corporal"),
            ("Flexiones Invertidas Ligeras", 2, "8-10", "3", "Silla"),
            ("Caminata Ligera", 1, "30 min", "1", "Peso corporal"),
        ],
    },
]

# ── Reminders a new user starts with ──
DEFAULT_REMINDERS: list[DefaultReminder] = [
    {"slug": "creatine", "time": "07:30", "supplement": "Creatina", "dose": "5g con desayuno"},
    {"slug": "citrulline", "time": "17:30", "supplement": "Citrulina Malato", "dose": "6-8g (30-45 min antes del entrenamiento)"},
    {"slug": "caffeine", "time": "17:30", "supplement": "Cafeína", "dose": "100mg (junto con Citrulina)"},
    {"slug": "restore", "time": "23:00", "supplement": "Restore", "dose": "1 cápsula (1 hora antes de dormir)"},
]
