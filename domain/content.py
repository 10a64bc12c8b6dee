"""Static page copy. Immutable data rendered by the view modules."""

# --- Shell ---

HERO = {
    "headline": "Build a high‑trust, high‑performing team—on purpose.",
    "body": (
        "Practical, ethical team coaching for leaders who want better decisions, faster execution, "
        "and a culture where people do their best work together."
    ),
    "primary_cta": "Start a Conversation",
    "secondary_cta": "See a Sample Session",
    "secondary_route": "looks",
}

QUICK_LINKS = [
    ("tools", "Explore Tools & Modalities"),
    ("assess", "Assessments"),
    ("icf", "ICF Team Coaching Competencies"),
    ("compare", "Teams vs Groups (Comparison)"),
]

FOOTER_LINKS = ["Privacy", "Terms"]

# --- Home ---

HOME_INTRO = {
    "title": "Team Coaching that Turns Potential into Performance",
    "subtitle": "Evidence-informed. Human-centered. Outcome-driven.",
    "body": (
        "I partner with intact teams to improve how they think, relate, and execute—so the business "
        "moves faster and people thrive. Through a blend of **team coaching, facilitation, and targeted "
        "capability-building**, we address the real work in real time."
    ),
    "cta": "Book a Discovery Call",
}

VALUE_PILLS = ["Psychological Safety", "Decision Quality", "Alignment", "Execution", "Accountability"]

UNIQUE_VALUE = (
    "**We coach the system, not just the individuals.** Your team learns to diagnose itself, make better "
    "commitments, and sustain performance improvements—long after the engagement ends."
)

TEAMS_SERVED = [
    "Executive & senior leadership teams",
    "Cross-functional product squads",
    "Program/portfolio leadership teams",
    "Operational & service delivery teams",
    "Project launch / transformation teams",
    "Public sector & mission-driven teams",
]

PAIN_POINTS = [
    "Unclear purpose, priorities, or roles",
    "Low psychological safety; limited candor",
    "Siloed decision-making and rework",
    "Unproductive conflict or passive agreement",
    "Meetings without outcomes or follow-through",
    "Stalled initiatives; slow time-to-value",
]

OUTCOMES = [
    "Shared purpose, strategy, and decision rights",
    "High trust and healthy, constructive conflict",
    "Crisp operating rhythms & meeting hygiene",
    "Clear accountabilities and team agreements",
    "Faster, better decisions with visible ownership",
    "Measured progress tied to business impact",
]

ENGAGEMENT_FLOW = [
    ("Discovery & Contracting",
     "Clarify purpose, stakeholders, scope, success criteria, and ethical boundaries."),
    ("Diagnostics & Goal Setting",
     "Lightweight assessments + interviews; co-create team goals & working agreements."),
    ("Live Team Coaching",
     "Coach during real work—decision forums, planning, retros—so new habits stick."),
    ("Targeted Capability Building",
     "Micro-trainings on essentials (e.g., decision rights, feedback, conflict)."),
    ("Measure & Sustain",
     "Pulse metrics, behavior checks, and embed rituals; transition to self-coaching."),
]

# --- What coaching looks like ---

LOOKS_INTRO = {
    "title": "What Team Coaching Looks Like",
    "subtitle": "Real conversations, real work, real outcomes—guided with intention and ethics",
    "body": (
        "A typical session blends observation, inquiry, and timely interventions while the team works on "
        "its real priorities. We use data (agreements, roles, decisions, dynamics) to help the team see "
        "itself and choose better ways of working."
    ),
}

SAMPLE_AGENDA = [
    ("0:00–0:10", "Opening, purpose, and check-in"),
    ("0:10–0:25", "Review of working agreements & progress on goals"),
    ("0:25–1:05", "Coach the real work (e.g., decision, conflict, planning)"),
    ("1:05–1:20", "Micro-teach (e.g., feedback, decision rights)"),
    ("1:20–1:30", "Commitments, measures, and close"),
]

COACHING_MOVES = [
    "Contracting in the moment: naming purpose and outcomes",
    "Surfacing patterns: who speaks, how decisions land, where energy drops",
    "Inviting differing perspectives; building psychological safety",
    "Making work visible: roles, decision rights, interdependencies",
    "Testing commitments and clarifying next steps",
]

CADENCE = (
    "Most engagements run **8–16 weeks** with bi‑weekly sessions, inter-session nudges, and pulse "
    "measures. We customize frequency for your context and business rhythm."
)

# --- Tools ---

TOOLS_INTRO = {
    "title": "Tools & Modalities",
    "subtitle": "We meet the team where it is—then choose the lightest‑weight intervention that moves performance",
    "body": (
        "We blend coaching with facilitation and capability building. Below are the core modalities and "
        "example activities. We’ll co‑design the right mix for your team’s goals, maturity, and constraints."
    ),
}

TOOL_GROUPS = [
    {
        "title": "Team Building Activities",
        "intro": "Energizers and connection rituals that strengthen trust and identity—without the trust fall cringe.",
        "items": [
            "Values mapping and team chartering",
            "Story circles for origin & purpose",
            "Strengths constellation (visual map of superpowers)",
            "Appreciation round + specific feedback prompts",
        ],
        "cta": "Request a Sample Agenda",
    },
    {
        "title": "Team Training Activities",
        "intro": "Targeted micro‑workshops to build shared skills that unlock performance.",
        "items": [
            "Decision rights & operating rhythms",
            "Constructive conflict & feedback loops",
            "Prioritization and portfolio flow",
            "Meeting hygiene and facilitation basics",
        ],
        "cta": "See the Micro‑Workshop List",
    },
    {
        "title": "Team Consulting",
        "intro": (
            "When you need a faster diagnostic or artifacts: we design operating models, role clarity, and "
            "decision frameworks with your leaders—then help the team adopt them."
        ),
        "items": [
            "Org and role mapping",
            "Decision frameworks (e.g., RAPID, RACI variants)",
            "Team operating rhythm design",
        ],
        "cta": "Discuss a Diagnostic Sprint",
    },
    {
        "title": "Team Mentoring",
        "intro": "Advising team leads on leading the system (not just individuals).",
        "items": [
            "Leader shadowing and debrief",
            "1:1 support for tough conversations",
            "On‑the‑job practice plans",
        ],
        "cta": "Add Leader Mentoring",
    },
    {
        "title": "Team Facilitation",
        "intro": "Neutral process leadership for high‑stakes sessions (strategy, planning, retrospectives).",
        "items": [
            "Strategy offsites and OKR alignment",
            "Quarterly planning & prioritization",
            "Retrospectives and after‑action reviews",
        ],
        "cta": "Book a Facilitated Session",
    },
    {
        "title": "Team Coaching",
        "intro": "The core of our work: sustained, systemic coaching as the team tackles its real work.",
        "items": [
            "Contracting and shared goals",
            "Observe → reflect → experiment cycles",
            "Pulse measures and behavior checks",
            "Sustainment plan and transition to self‑coaching",
        ],
        "cta": "Start Team Coaching",
    },
]

# --- Assessments ---

ASSESS_INTRO = {
    "title": "Assessments",
    "subtitle": "Right‑sized data that informs action—not binders of reports that sit on shelves",
    "body": (
        "We use assessment as a **means** to accelerate change, not an end. Our approach blends quick "
        "pulses, focused interviews, and (when useful) validated instruments. We prioritize transparency, "
        "informed consent, and practical insights that teams can act on immediately."
    ),
}

ASSESSMENT_APPROACHES = [
    {
        "name": "Lightweight Pulse (No-Cost)",
        "bullets": [
            "5–8 item survey on trust, clarity, and execution",
            "Run bi‑weekly to spot trends; share results transparently",
            "Co‑create experiments based on what the data suggests",
        ],
    },
    {
        "name": "360° Team Maturity Snapshot",
        "bullets": [
            "Short interview set with leader, sponsor, and 3–5 members",
            "Maps strengths/gaps across purpose, roles, decision rights, ways of working",
            "Produces a one‑page heatmap to prioritize focus areas",
        ],
    },
    {
        "name": "Validated Instruments (On Request)",
        "bullets": [
            "Use established tools when helpful and appropriate",
            "Combine with observation of real meetings for context",
            "Always contract for ethics, consent, and data usage",
        ],
    },
]

SAMPLE_PULSE = [
    "We have a clear, shared purpose that guides our priorities.",
    "Decision rights are explicit; we know who decides and how.",
    "We speak candidly about risks and concerns.",
    "Meetings produce clear outcomes, owners, and timelines.",
    "We follow through on commitments and review results.",
]

DATA_ETHICS = [
    "Contract for purpose, scope, confidentiality, and data access.",
    "Use team‑level reporting; avoid member ranking or blame.",
    "Share results with the full team and co‑decide next steps.",
]

DELIVERABLES = [
    "One‑page heatmap of strengths and focus areas.",
    "Top 3 hypotheses + suggested experiments.",
    "Baseline → pulse tracker for visible progress.",
]

# --- ICF competencies ---

ICF_INTRO = {
    "title": "ICF Team Coaching Competencies",
    "subtitle": "Aligned with ICF Core Competencies, interpreted for a team‑as‑client context",
    "body": (
        "Team coaching builds on the ICF Core Competencies with specific attention to the team as a living "
        "system. Below are the competency areas we emphasize and how they show up in practice."
    ),
}

COMPETENCIES = [
    {
        "name": "Demonstrates Ethical Practice (Team Context)",
        "points": [
            "Maintains confidentiality and clarifies boundaries with the full team",
            "Contracts for roles, sponsorship, and shared responsibility",
        ],
    },
    {
        "name": "Embodies a Coaching Mindset",
        "points": [
            "Maintains presence and curiosity with the whole system",
            "Reflects and adapts based on system feedback and data",
        ],
    },
    {
        "name": "Establishes and Maintains Agreements (Team)",
        "points": [
            "Co‑creates team goals, norms, and working agreements",
            "Contracts in‑the‑moment as needs shift",
        ],
    },
    {
        "name": "Cultivates Trust and Safety (Team)",
        "points": [
            "Builds psychological safety for candor, dissent, and learning",
            "Honors diverse voices and shared accountability",
        ],
    },
    {
        "name": "Maintains Presence (Team System)",
        "points": [
            "Tracks patterns, energy, and dynamics across members",
            "Balances support and challenge for the whole",
        ],
    },
    {
        "name": "Listens Actively (Across the System)",
        "points": [
            "Surfaces beliefs, assumptions, and meaning‑making",
            "Listens for interdependencies, not just individuals",
        ],
    },
    {
        "name": "Evokes Awareness (Team)",
        "points": [
            "Uses data and reflection to help the team see itself",
            "Facilitates insight that leads to collective action",
        ],
    },
    {
        "name": "Facilitates Client Growth (Team)",
        "points": [
            "Supports experimentation and new habits between sessions",
            "Links behavior change to business outcomes",
        ],
    },
]

# --- Teams vs groups ---

COMPARE_INTRO = {
    "title": "Teams vs Groups",
    "subtitle": "Why team coaching is different—and when to use it",
    "body": (
        "Teams and groups aren’t the same. Team coaching treats the team as the client: success means "
        "better collective thinking, relating, and execution. Use this table to clarify which you have and "
        "what support fits."
    ),
}

COMPARISON_ROWS = [
    ("Primary Purpose",
     "Deliver shared outcomes that require interdependence",
     "Coordinate individuals who may share information but own separate goals"),
    ("Identity",
     "Clear, shared identity and purpose",
     "Loose affiliation; identity is individual‑centric"),
    ("Decision Making",
     "Collective decisions with explicit decision rights",
     "Individual decisions; coordination when needed"),
    ("Accountability",
     "Mutual accountability for collective results",
     "Individual accountability for personal outputs"),
    ("Ways of Working",
     "Team agreements, operating rhythm, and roles",
     "Ad hoc norms; meeting‑by‑meeting"),
    ("Coaching Focus",
     "The system (relationships, patterns, structures)",
     "Skills or topics of individuals in a cohort"),
]

# --- Contact block ---

CONTACT_INTRO = {
    "title": "Ready to explore team coaching?",
    "body": (
        "Book a 25‑minute discovery call or send a note. We’ll align on goals, context, and a right‑sized "
        "first step."
    ),
    "ctas": ["Book a Call", "Download One‑Pager"],
}
