"""Path definitions — the four themed practice plans."""

PATHS = [
    {
        "id": "asana",
        "name": "Aliven Asana Path",
        "mainPillar": "Yoga",
        "supports": ["Meditation", "Movement Medicine"],
        "description": (
            "A yoga-led path focused on deepening asana practice through "
            "awareness, presence, and embodied listening."
        ),
        "weeklyPrompts": [
            "When I move through asana with awareness, what do I notice about my body today without trying to change anything?",
            "Where do I feel effort or holding in my practice, and what happens when I allow a little more softness?",
            "How does my relationship to my body shift when I listen instead of push?",
            "What has my asana practice taught me about balance between stability and freedom in my life?",
        ],
    },
    {
        "id": "movement-medicine",
        "name": "Aliven Movement Medicine Path",
        "mainPillar": "Dance & Movement Therapy",
        "supports": ["Yin Yoga", "Meditation"],
        "description": (
            "An expressive, somatic path guided by intuitive movement, "
            "sensation, and emotional awareness."
        ),
        "weeklyPrompts": [
            "What sensations, emotions, or impulses are asking to be expressed through my body right now?",
            "What shifts when I allow my body to move freely, without trying to make it look or feel a certain way?",
            "When I give myself permission to follow movement instead of controlling it, what do I discover about myself?",
            "How has moving from sensation and feeling influenced how I relate to myself this week?",
        ],
    },
    {
        "id": "stillness",
        "name": "Aliven Stillness & Clarity Path",
        "mainPillar": "Meditation & Pranayama",
        "supports": ["Movement Medicine", "Yin Yoga"],
        "description": (
            "A meditation-led path focused on cultivating clarity, inner "
            "steadiness, and nervous system regulation."
        ),
        "weeklyPrompts": [
            "When I give myself time to be still, what do I notice about my inner state right now?",
            "What patterns of mind become visible when I slow down and observe without judgment?",
            "How does clarity show up when I allow space instead of searching for answers?",
            "What has this practice of stillness revealed about how I relate to my inner world?",
        ],
    },
    {
        "id": "strength",
        "name": "Aliven Rooted Strength Path",
        "mainPillar": "Strength (Pilates-based)",
        "supports": ["Yoga"],
        "description": (
            "A strength-led path rooted in Pilates principles, emphasizing "
            "stability, alignment, and mindful control."
        ),
        "weeklyPrompts": [
            "How does building physical strength feel in my body right now?",
            "Where do I feel more supported or capable in my body as I move through strength practices?",
            "How does physical strength influence my confidence or boundaries in daily life?",
            "What has this practice taught me about creating stability while allowing ease?",
        ],
    },
]
