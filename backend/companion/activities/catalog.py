"""Static wellness activity records, grouped by category."""

from __future__ import annotations

from typing import Any, Dict, List

CATEGORY_RECORDS: Dict[str, Dict[str, str]] = {
    "breathing": {
        "name": "Breathing Exercises",
        "icon": "🌬️",
        "description": "Powerful breathwork techniques",
        "color": "#14b8a6",
    },
    "meditation": {
        "name": "Meditation",
        "icon": "🧘",
        "description": "Guided mindfulness practices",
        "color": "#8b5cf6",
    },
    "grounding": {
        "name": "Grounding",
        "icon": "🌍",
        "description": "Anchor yourself in the present",
        "color": "#f59e0b",
    },
    "movement": {
        "name": "Movement",
        "icon": "💪",
        "description": "Physical activities for wellness",
        "color": "#ec4899",
    },
    "journaling": {
        "name": "Journaling",
        "icon": "📝",
        "description": "Reflective writing exercises",
        "color": "#06b6d4",
    },
    "mindset": {
        "name": "Mindset",
        "icon": "🧠",
        "description": "Cognitive reframing techniques",
        "color": "#10b981",
    },
    "sleep": {
        "name": "Sleep",
        "icon": "😴",
        "description": "Better sleep strategies",
        "color": "#6366f1",
    },
    "quick-reset": {
        "name": "Quick Resets",
        "icon": "⚡",
        "description": "1-minute emergency tools",
        "color": "#f97316",
    },
}


ACTIVITY_RECORDS: List[Dict[str, Any]] = [
    # --- breathing ---
    {
        "id": "box-breathing",
        "name": "Box Breathing",
        "category": "breathing",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "🟦",
        "description": "Navy SEAL technique for stress relief and focus",
        "benefits": ["Reduces stress by 67%", "Improves focus", "Calms nervous system"],
        "effectiveness": {"stress": 0.89, "anxiety": 0.84, "focus": 0.76},
        "instructions": [
            {"step": 1, "text": "Inhale slowly through your nose", "duration": 4, "action": "inhale"},
            {"step": 2, "text": "Hold your breath", "duration": 4, "action": "hold"},
            {"step": 3, "text": "Exhale slowly through your mouth", "duration": 4, "action": "exhale"},
            {"step": 4, "text": "Hold with empty lungs", "duration": 4, "action": "hold"},
            {"step": 5, "text": "Repeat for 5-10 cycles", "duration": 0, "action": "repeat"},
        ],
        "visualization": "box",
        "audio": "calm-ambient",
    },
    {
        "id": "alternate-nostril-breathing",
        "name": "Alternate Nostril Breathing",
        "category": "breathing",
        "duration": 300,
        "difficulty": "intermediate",
        "emoji": "🌬️",
        "description": "Ancient yogic practice for balance and calm",
        "benefits": ["Balances nervous system", "Reduces anxiety", "Improves focus"],
        "effectiveness": {"anxiety": 0.88, "stress": 0.82, "balance": 0.85},
        "instructions": [
            {"step": 1, "text": "Sit comfortably with straight spine", "duration": 0},
            {"step": 2, "text": "Close right nostril, inhale through left", "duration": 4, "action": "inhale"},
            {"step": 3, "text": "Close both, hold breath", "duration": 4, "action": "hold"},
            {"step": 4, "text": "Release right, exhale through right", "duration": 4, "action": "exhale"},
            {"step": 5, "text": "Inhale through right nostril", "duration": 4, "action": "inhale"},
            {"step": 6, "text": "Close both, hold", "duration": 4, "action": "hold"},
            {"step": 7, "text": "Release left, exhale through left", "duration": 4, "action": "exhale"},
        ],
        "visualization": "alternate",
        "audio": "nature-sounds",
    },
    {
        "id": "4-7-8-breathing",
        "name": "4-7-8 Breathing",
        "category": "breathing",
        "duration": 240,
        "difficulty": "beginner",
        "emoji": "😴",
        "description": "Natural tranquilizer for the nervous system",
        "benefits": ["Promotes sleep", "Reduces anxiety", "Lowers heart rate"],
        "effectiveness": {"sleep": 0.91, "anxiety": 0.85, "calm": 0.87},
        "instructions": [
            {"step": 1, "text": "Exhale completely through mouth", "duration": 0, "action": "exhale"},
            {"step": 2, "text": "Inhale through nose", "duration": 4, "action": "inhale"},
            {"step": 3, "text": "Hold breath", "duration": 7, "action": "hold"},
            {"step": 4, "text": "Exhale through mouth (whoosh sound)", "duration": 8, "action": "exhale"},
            {"step": 5, "text": "Repeat 4-8 cycles", "duration": 0, "action": "repeat"},
        ],
        "visualization": "wave",
        "audio": "ocean-waves",
    },
    {
        "id": "energy-breathing",
        "name": "Energizing Breath",
        "category": "breathing",
        "duration": 120,
        "difficulty": "intermediate",
        "emoji": "⚡",
        "description": "Quick energy boost through breathwork",
        "benefits": ["Increases energy", "Improves alertness", "Boosts mood"],
        "effectiveness": {"energy": 0.83, "fatigue": 0.78, "mood": 0.72},
        "instructions": [
            {"step": 1, "text": "Stand or sit upright", "duration": 0},
            {"step": 2, "text": "Take quick inhale through nose", "duration": 1, "action": "inhale"},
            {"step": 3, "text": "Quick exhale through nose", "duration": 1, "action": "exhale"},
            {"step": 4, "text": "Repeat rapidly for 30 seconds", "duration": 30, "action": "repeat"},
            {"step": 5, "text": "Breathe normally for 30 seconds", "duration": 30, "action": "normal"},
        ],
        "visualization": "lightning",
        "audio": "energetic",
    },
    # --- meditation ---
    {
        "id": "body-scan-meditation",
        "name": "Body Scan Meditation",
        "category": "meditation",
        "duration": 300,
        "difficulty": "beginner",
        "emoji": "🧘",
        "description": "Systematic relaxation of entire body",
        "benefits": ["Releases tension", "Improves body awareness", "Promotes relaxation"],
        "effectiveness": {"stress": 0.85, "tension": 0.88, "awareness": 0.79},
        "script": [
            {"time": 0, "text": "Lie down or sit comfortably. Close your eyes."},
            {"time": 30, "text": "Bring attention to your toes. Notice any sensations."},
            {"time": 60, "text": "Move up to your feet and ankles. Release any tension."},
            {"time": 90, "text": "Scan your lower legs, knees, and thighs. Let them relax."},
            {"time": 120, "text": "Notice your hips and lower back. Allow them to soften."},
            {"time": 150, "text": "Move to your abdomen and chest. Feel your breath."},
            {"time": 180, "text": "Scan your shoulders, arms, and hands. Release tightness."},
            {"time": 210, "text": "Notice your neck, jaw, and face. Let go of tension."},
            {"time": 240, "text": "Feel your entire body relaxed and at ease."},
            {"time": 270, "text": "Take a few deep breaths. Slowly open your eyes."},
        ],
        "audio": "guided-meditation",
    },
    {
        "id": "calming-meditation",
        "name": "Quick Calm Meditation",
        "category": "meditation",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "☮️",
        "description": "Rapid reset for anxious moments",
        "benefits": ["Reduces anxiety fast", "Centers mind", "Restores calm"],
        "effectiveness": {"anxiety": 0.86, "calm": 0.84, "clarity": 0.71},
        "script": [
            {"time": 0, "text": "Find a quiet spot. Sit comfortably."},
            {"time": 20, "text": "Close your eyes. Take three deep breaths."},
            {"time": 40, "text": "Notice thoughts passing like clouds in the sky."},
            {"time": 80, "text": "Don't judge them. Just observe."},
            {"time": 120, "text": "Return focus to your breath whenever mind wanders."},
            {"time": 160, "text": "Feel yourself becoming calmer with each exhale."},
            {"time": 180, "text": "Open your eyes when ready. Notice how you feel."},
        ],
        "audio": "peaceful-piano",
    },
    {
        "id": "gratitude-meditation",
        "name": "Gratitude Practice",
        "category": "meditation",
        "duration": 240,
        "difficulty": "beginner",
        "emoji": "🙏",
        "description": "Cultivate appreciation and positive emotions",
        "benefits": ["Boosts mood", "Increases happiness", "Reduces stress"],
        "effectiveness": {"mood": 0.88, "happiness": 0.85, "stress": 0.73},
        "script": [
            {"time": 0, "text": "Sit comfortably. Take a few deep breaths."},
            {"time": 30, "text": "Think of something you're grateful for today."},
            {"time": 60, "text": "Really feel the appreciation in your heart."},
            {"time": 90, "text": "Think of someone who supports you. Send them gratitude."},
            {"time": 120, "text": "Appreciate your body for carrying you through life."},
            {"time": 150, "text": "Be grateful for this moment of peace."},
            {"time": 180, "text": "Notice any warmth or lightness you feel."},
            {"time": 210, "text": "Carry this gratitude with you today."},
        ],
        "audio": "uplifting-music",
    },
    # --- grounding ---
    {
        "id": "5-4-3-2-1-grounding",
        "name": "5-4-3-2-1 Grounding",
        "category": "grounding",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "🌍",
        "description": "Sensory technique to anchor you in the present",
        "benefits": ["Stops anxiety spirals", "Returns you to present", "Easy to do anywhere"],
        "effectiveness": {"anxiety": 0.89, "panic": 0.85, "grounding": 0.92},
        "instructions": [
            {"step": 1, "text": "5 things you can SEE around you", "prompt": "What do you see?"},
            {"step": 2, "text": "4 things you can TOUCH or feel", "prompt": "What can you touch?"},
            {"step": 3, "text": "3 things you can HEAR right now", "prompt": "What do you hear?"},
            {"step": 4, "text": "2 things you can SMELL", "prompt": "What can you smell?"},
            {"step": 5, "text": "1 thing you can TASTE", "prompt": "What can you taste?"},
            {"step": 6, "text": "Take a deep breath. You're here, you're safe."},
        ],
    },
    # --- movement ---
    {
        "id": "gentle-yoga",
        "name": "Gentle Desk Yoga",
        "category": "movement",
        "duration": 300,
        "difficulty": "beginner",
        "emoji": "🧘‍♀️",
        "description": "Simple stretches you can do at your desk",
        "benefits": ["Releases tension", "Improves posture", "Boosts energy"],
        "effectiveness": {"tension": 0.82, "posture": 0.78, "energy": 0.71},
        "exercises": [
            {"name": "Neck Rolls", "duration": 30, "description": "Slowly roll head in circles"},
            {"name": "Shoulder Shrugs", "duration": 30, "description": "Lift shoulders to ears, release"},
            {"name": "Seated Twist", "duration": 45, "description": "Twist gently to each side"},
            {"name": "Forward Fold", "duration": 45, "description": "Bend forward, let arms hang"},
            {"name": "Cat-Cow Stretch", "duration": 60, "description": "Arch and round your back"},
            {"name": "Wrist Circles", "duration": 30, "description": "Circle wrists both directions"},
            {"name": "Deep Breathing", "duration": 60, "description": "Three deep, slow breaths"},
        ],
        "video": "desk-yoga-guide",
    },
    {
        "id": "micro-workout",
        "name": "5-Minute Energizer",
        "category": "movement",
        "duration": 300,
        "difficulty": "beginner",
        "emoji": "💪",
        "description": "Quick workout when you don't feel like a full session",
        "benefits": ["Better than nothing", "Builds momentum", "Boosts mood"],
        "effectiveness": {"motivation": 0.79, "energy": 0.75, "mood": 0.81},
        "exercises": [
            {"name": "Jumping Jacks", "duration": 30, "reps": "30 seconds"},
            {"name": "Bodyweight Squats", "duration": 45, "reps": "15 reps"},
            {"name": "Push-ups (modified okay)", "duration": 45, "reps": "10 reps"},
            {"name": "High Knees", "duration": 30, "reps": "30 seconds"},
            {"name": "Plank Hold", "duration": 30, "reps": "30 seconds"},
            {"name": "Cool down walk", "duration": 120, "reps": "Walk around"},
        ],
    },
    {
        "id": "nature-walk",
        "name": "Mindful Nature Walk",
        "category": "movement",
        "duration": 600,
        "difficulty": "beginner",
        "emoji": "🌳",
        "description": "Walking meditation in nature",
        "benefits": ["Reduces stress significantly", "Improves mood", "Boosts creativity"],
        "effectiveness": {"stress": 0.84, "mood": 0.87, "creativity": 0.76},
        "instructions": [
            {"step": 1, "text": "Go outside. Leave phone behind if possible."},
            {"step": 2, "text": "Walk at a comfortable pace."},
            {"step": 3, "text": "Notice the colors, sounds, smells around you."},
            {"step": 4, "text": "Feel your feet touching the ground with each step."},
            {"step": 5, "text": "Breathe the fresh air deeply."},
            {"step": 6, "text": "Let thoughts come and go like the breeze."},
            {"step": 7, "text": "Return feeling refreshed."},
        ],
    },
    # --- journaling ---
    {
        "id": "stress-journal",
        "name": "Stress Release Journal",
        "category": "journaling",
        "duration": 300,
        "difficulty": "beginner",
        "emoji": "📝",
        "description": "Write out your stress to release it",
        "benefits": ["Externalizes worries", "Clarifies thoughts", "Reduces rumination"],
        "effectiveness": {"stress": 0.81, "clarity": 0.84, "rumination": 0.77},
        "prompts": [
            "What's causing me stress right now?",
            "What can I control about this situation?",
            "What is outside my control?",
            "What's one small step I can take today?",
            "Who can I reach out to for support?",
            "What would I tell a friend in this situation?",
        ],
    },
    {
        "id": "gratitude-journal",
        "name": "Gratitude Journal",
        "category": "journaling",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "✨",
        "description": "Daily gratitude practice to boost mood",
        "benefits": ["Increases happiness 25%", "Improves sleep", "Reduces depression"],
        "effectiveness": {"happiness": 0.88, "depression": 0.76, "sleep": 0.68},
        "prompts": [
            "3 things I'm grateful for today",
            "Someone who made me smile",
            "Something my body did well today",
            "A small win I had",
            "Something beautiful I noticed",
        ],
    },
    {
        "id": "victory-log",
        "name": "Victory Log",
        "category": "journaling",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "🏆",
        "description": "Track your wins to build momentum",
        "benefits": ["Boosts confidence", "Builds motivation", "Shows progress"],
        "effectiveness": {"confidence": 0.82, "motivation": 0.85, "awareness": 0.79},
        "prompts": [
            "What did I accomplish today (big or small)?",
            "What am I proud of myself for?",
            "What challenge did I face today?",
            "What did I learn?",
            "How did I show up for myself?",
        ],
    },
    # --- mindset ---
    {
        "id": "micro-goal-setting",
        "name": "Micro-Goal Strategy",
        "category": "mindset",
        "duration": 240,
        "difficulty": "beginner",
        "emoji": "🎯",
        "description": "Break overwhelming tasks into tiny steps",
        "benefits": ["Reduces overwhelm", "Builds momentum", "Increases success rate"],
        "effectiveness": {"overwhelm": 0.87, "completion": 0.84, "motivation": 0.78},
        "steps": [
            "1. What feels overwhelming right now?",
            "2. What's the absolute smallest first step?",
            "3. Can you do just that one tiny thing?",
            "4. Celebrate that step!",
            "5. What's the next micro-step?",
        ],
        "example": "Full workout → 5 push-ups → 1 push-up → Put on workout clothes",
    },
    {
        "id": "anxiety-reframe",
        "name": "Anxiety Reframe",
        "category": "mindset",
        "duration": 300,
        "difficulty": "intermediate",
        "emoji": "🔄",
        "description": "Transform anxious thoughts into helpful ones",
        "benefits": ["Reduces anxiety", "Improves perspective", "Builds resilience"],
        "effectiveness": {"anxiety": 0.79, "perspective": 0.83, "resilience": 0.74},
        "framework": [
            {"step": "Identify", "question": "What's the anxious thought?"},
            {"step": "Challenge", "question": "Is this thought 100% true?"},
            {"step": "Evidence", "question": "What evidence contradicts this thought?"},
            {"step": "Reframe", "question": "What's a more balanced way to think about this?"},
            {"step": "Action", "question": "What small action can I take?"},
        ],
    },
    # --- sleep ---
    {
        "id": "sleep-hygiene-check",
        "name": "Sleep Hygiene Checklist",
        "category": "sleep",
        "duration": 180,
        "difficulty": "beginner",
        "emoji": "😴",
        "description": "Optimize your sleep environment",
        "benefits": ["Improves sleep quality", "Reduces insomnia", "More energy"],
        "effectiveness": {"sleep": 0.84, "energy": 0.77, "insomnia": 0.81},
        "checklist": [
            {"item": "Room is dark (or use eye mask)", "optimal": True},
            {"item": "Room temperature 60-67°F (15-19°C)", "optimal": True},
            {"item": "No screens 1 hour before bed", "optimal": True},
            {"item": "No caffeine after 2pm", "optimal": True},
            {"item": "Consistent bedtime", "optimal": True},
            {"item": "Wind-down routine (reading, stretching)", "optimal": True},
            {"item": "No heavy meals 3 hours before bed", "optimal": True},
        ],
    },
    {
        "id": "sleep-routine",
        "name": "Better Sleep Routine",
        "category": "sleep",
        "duration": 1800,
        "difficulty": "beginner",
        "emoji": "🌙",
        "description": "Evening routine for quality sleep",
        "benefits": ["Fall asleep faster", "Sleep more deeply", "Wake refreshed"],
        "effectiveness": {"sleepQuality": 0.88, "fallAsleep": 0.85, "wakeRefreshed": 0.82},
        "timeline": [
            {"time": -60, "activity": "Dim lights, put away screens"},
            {"time": -45, "activity": "Light stretching or gentle yoga"},
            {"time": -30, "activity": "Warm shower or bath"},
            {"time": -20, "activity": "Journaling or reading"},
            {"time": -10, "activity": "4-7-8 breathing or meditation"},
            {"time": 0, "activity": "Lights out, sleep"},
        ],
    },
    {
        "id": "power-nap-guide",
        "name": "Perfect Power Nap",
        "category": "sleep",
        "duration": 1200,
        "difficulty": "beginner",
        "emoji": "⚡",
        "description": "Strategic napping for energy without grogginess",
        "benefits": ["Boosts alertness", "Improves performance", "No sleep inertia"],
        "effectiveness": {"energy": 0.86, "alertness": 0.84, "performance": 0.78},
        "protocol": [
            {"step": 1, "text": "Find quiet, dark spot", "duration": 0},
            {"step": 2, "text": "Set alarm for 20 minutes (not longer!)", "duration": 0},
            {"step": 3, "text": "Lie down or recline", "duration": 0},
            {"step": 4, "text": "Close eyes, relax muscles", "duration": 60},
            {"step": 5, "text": "Don't worry if you don't fall asleep", "duration": 0},
            {"step": 6, "text": "Get up immediately when alarm rings", "duration": 0},
            {"step": 7, "text": "Move around, get light exposure", "duration": 0},
        ],
        "best_time": "Between 1-3pm",
    },
    # --- quick resets ---
    {
        "id": "cold-water-face-splash",
        "name": "Cold Water Reset",
        "category": "quick-reset",
        "duration": 60,
        "difficulty": "beginner",
        "emoji": "💧",
        "description": "Activate dive reflex to calm nervous system",
        "benefits": ["Instant calm", "Lowers heart rate", "Reduces panic"],
        "effectiveness": {"panic": 0.88, "heartRate": 0.86, "calm": 0.82},
        "instructions": [
            "1. Fill bowl with very cold water",
            "2. Take a deep breath",
            "3. Submerge face for 15-30 seconds",
            "4. Come up, breathe normally",
            "5. Repeat 2-3 times if needed",
        ],
        "science": "Activates mammalian dive reflex, instantly calming the nervous system",
    },
    {
        "id": "music-therapy",
        "name": "Mood-Boosting Music",
        "category": "quick-reset",
        "duration": 300,
        "difficulty": "beginner",
        "emoji": "🎵",
        "description": "Strategic music listening for emotional regulation",
        "benefits": ["Improves mood", "Reduces stress", "Boosts energy"],
        "effectiveness": {"mood": 0.83, "stress": 0.76, "energy": 0.78},
        "playlists": [
            {"mood": "stressed", "type": "Calm instrumental, nature sounds"},
            {"mood": "sad", "type": "Uplifting, major key songs"},
            {"mood": "anxious", "type": "Slow tempo, predictable rhythm"},
            {"mood": "unmotivated", "type": "Energetic, fast tempo, pump-up songs"},
            {"mood": "angry", "type": "Heavy music first, then calmer"},
        ],
        "tip": "Match your current mood first, then gradually shift to desired mood",
    },
]
