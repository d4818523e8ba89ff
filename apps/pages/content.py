"""Static copy rendered by the marketing pages."""

SITE_NAME = 'The Education Foundation'
SITE_TAGLINE = 'Empowering students through community support'

HEADER_NAVIGATION = [
    {'name': 'Students', 'url_name': 'pages:students'},
    {'name': 'How It Works', 'url_name': 'pages:how-it-works'},
    {'name': 'About', 'url_name': 'pages:about'},
]

# Plain hrefs, not every target is routed by this site
FOOTER_NAVIGATION = {
    'Donate': [
        {'name': 'Browse Students', 'href': '/students/'},
        {'name': 'How It Works', 'href': '/how-it-works/'},
        {'name': 'Submit a Case', 'href': '/submit-case/'},
        {'name': 'Success Stories', 'href': '/stories/'},
    ],
    'About': [
        {'name': 'About Us', 'href': '/about/'},
        {'name': 'Our Mission', 'href': '/about/#mission'},
        {'name': 'Team', 'href': '/about/#team'},
        {'name': 'Contact', 'href': '/contact/'},
    ],
    'Legal': [
        {'name': 'Privacy Policy', 'href': '/privacy/'},
        {'name': 'Terms of Service', 'href': '/terms/'},
        {'name': 'Donor Agreement', 'href': '/donor-agreement/'},
        {'name': 'Transparency', 'href': '/transparency/'},
    ],
}

SOCIAL_LINKS = [
    {'name': 'Twitter', 'href': '#'},
    {'name': 'Facebook', 'href': '#'},
    {'name': 'Instagram', 'href': '#'},
    {'name': 'LinkedIn', 'href': '#'},
]

# Home

HOME_STATS = [
    {'label': 'Students Helped', 'value': '500+', 'icon': 'users'},
    {'label': 'Funds Raised', 'value': '₹25L+', 'icon': 'trending-up'},
    {'label': 'Active Donors', 'value': '300+', 'icon': 'heart'},
    {'label': 'Success Stories', 'value': '150+', 'icon': 'graduation-cap'},
]

HOME_HOW_IT_WORKS = [
    {
        'step': 1,
        'title': 'Browse Students',
        'description': (
            'Explore verified cases of students in need. Read their stories and '
            'understand their specific educational requirements.'
        ),
        'icon': 'search',
    },
    {
        'step': 2,
        'title': 'Choose to Support',
        'description': (
            'Select a student whose story resonates with you. Contribute any '
            'amount towards their education goals.'
        ),
        'icon': 'heart',
    },
    {
        'step': 3,
        'title': 'Track Impact',
        'description': (
            'Receive updates on how your contribution is making a difference. '
            'See the real impact of your generosity.'
        ),
        'icon': 'trending-up',
    },
]

HOME_FEATURES = [
    'Verified student cases',
    '100% transparent donations',
    'Direct impact tracking',
    'Tax-deductible receipts',
    'Regular progress updates',
    'Secure payment processing',
]

# About

ABOUT_VALUES = [
    {
        'title': 'Transparency',
        'description': (
            'Every donation is tracked and reported. Donors see exactly how '
            'their contributions are used.'
        ),
        'icon': 'eye',
    },
    {
        'title': 'Integrity',
        'description': (
            'We verify every case thoroughly. Only genuine students in need '
            'are listed on our platform.'
        ),
        'icon': 'shield',
    },
    {
        'title': 'Impact',
        'description': (
            'We focus on measurable outcomes. Education changes lives, and we '
            'help make it accessible.'
        ),
        'icon': 'target',
    },
    {
        'title': 'Community',
        'description': (
            'We believe in the power of collective action. Together, we can '
            'transform education access.'
        ),
        'icon': 'users',
    },
]

ABOUT_STATS = [
    {'label': 'Students Supported', 'value': '500+'},
    {'label': 'Total Funds Raised', 'value': '₹25L+'},
    {'label': 'Active Donors', 'value': '300+'},
    {'label': 'Success Rate', 'value': '95%'},
]

ABOUT_PILLARS = [
    {
        'name': 'Our Mission',
        'role': 'Why We Exist',
        'description': (
            'To bridge the gap between generous donors and deserving students, '
            'ensuring that financial constraints never stand in the way of education.'
        ),
        'icon': 'target',
        'anchor': 'mission',
    },
    {
        'name': 'Our Vision',
        'role': 'What We Aim For',
        'description': (
            'A world where every student has access to quality education, '
            'supported by a community that believes in their potential.'
        ),
        'icon': 'lightbulb',
        'anchor': 'vision',
    },
    {
        'name': 'Our Approach',
        'role': 'How We Work',
        'description': (
            'We verify, connect, and track. Every student is verified, every '
            'donation is tracked, and every impact is measured.'
        ),
        'icon': 'compass',
        'anchor': 'team',
    },
]

ABOUT_STORY = [
    (
        'The Education Foundation was born from a simple observation: countless '
        'bright students are forced to abandon their educational dreams due to '
        'financial constraints.'
    ),
    (
        'We started with a mission to change this. By creating a transparent '
        "platform that connects donors directly with students, we've helped "
        'hundreds of young minds continue their education.'
    ),
    (
        "Today, we're proud to have built a community of supporters who believe "
        'that education is the most powerful tool for change.'
    ),
]

# How it works

DONOR_STEPS = [
    {
        'step': 1,
        'title': 'Browse Students',
        'description': (
            'Explore verified profiles of students in need. Read their stories, '
            'understand their educational goals, and see exactly what support they need.'
        ),
        'icon': 'search',
    },
    {
        'step': 2,
        'title': 'Choose to Support',
        'description': (
            'Select a student whose story resonates with you. Contribute any '
            'amount - every rupee makes a difference in their educational journey.'
        ),
        'icon': 'heart',
    },
    {
        'step': 3,
        'title': 'Make a Donation',
        'description': (
            'Complete your donation securely through our payment system. Choose '
            'one-time or recurring support. Get instant tax receipts.'
        ),
        'icon': 'credit-card',
    },
    {
        'step': 4,
        'title': 'Track Impact',
        'description': (
            'Receive regular updates on how your contribution is being used. See '
            'the real impact of your generosity through progress reports.'
        ),
        'icon': 'trending-up',
    },
]

SUBMISSION_STEPS = [
    {
        'step': 1,
        'title': 'Submit a Case',
        'description': (
            'Fill out our detailed form with student information, educational '
            'needs, and supporting documents.'
        ),
        'icon': 'file-text',
    },
    {
        'step': 2,
        'title': 'Verification',
        'description': (
            'Our team verifies all information, including school enrollment, '
            'family situation, and financial need.'
        ),
        'icon': 'shield-check',
    },
    {
        'step': 3,
        'title': 'Profile Creation',
        'description': (
            'Once approved, we create a detailed profile that helps donors '
            'understand and connect with the student.'
        ),
        'icon': 'user-check',
    },
    {
        'step': 4,
        'title': 'Receive Support',
        'description': (
            'Donations are collected and disbursed directly for educational '
            'expenses as specified.'
        ),
        'icon': 'gift',
    },
]

TRUST_FEATURES = [
    {
        'title': '100% Verified Cases',
        'description': 'Every student case goes through a thorough verification process before being listed.',
    },
    {
        'title': 'Transparent Tracking',
        'description': 'Track exactly how donations are used with detailed expense reports and updates.',
    },
    {
        'title': 'Direct Impact',
        'description': 'Funds go directly towards educational expenses - fees, books, uniforms, supplies.',
    },
    {
        'title': 'Tax Benefits',
        'description': 'All donations are eligible for tax deductions under Section 80G.',
    },
    {
        'title': 'Secure Payments',
        'description': 'Industry-standard encryption ensures your payment information is always safe.',
    },
    {
        'title': 'Regular Updates',
        'description': 'Receive progress reports and updates on students you support.',
    },
]
