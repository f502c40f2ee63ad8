"""
Static site content: medical departments, specialist tabs and the
bookable time slots.
"""
from __future__ import annotations

from typing import Optional

DEFAULT_LOCATION = 'Main Hospital'

TIME_SLOTS = [
    '09:00 AM - 09:30 AM',
    '09:30 AM - 10:00 AM',
    '10:00 AM - 10:30 AM',
    '10:30 AM - 11:00 AM',
    '11:00 AM - 11:30 AM',
    '11:30 AM - 12:00 PM',
    '02:00 PM - 02:30 PM',
    '02:30 PM - 03:00 PM',
    '03:00 PM - 03:30 PM',
    '03:30 PM - 04:00 PM',
    '04:00 PM - 04:30 PM',
]

DEPARTMENTS = [
    {
        'id': 'cardiology',
        'title': 'Cardiology',
        'icon': 'heart-pulse',
        'summary': 'Comprehensive heart care including diagnosis, treatment, and prevention of cardiovascular diseases.',
        'description': (
            'Our cardiology department provides comprehensive diagnosis, treatment, and management of '
            'heart conditions including coronary artery disease, heart failure, arrhythmias, and more.'
        ),
        'features': [
            'Non-invasive cardiac testing',
            'Heart attack prevention and rehabilitation',
            'Pacemaker implantation and management',
            'Heart failure treatment',
        ],
    },
    {
        'id': 'neurology',
        'title': 'Neurology',
        'icon': 'brain',
        'summary': 'Specialized care for disorders of the nervous system, including the brain, spinal cord, and nerves.',
        'description': (
            'Our neurology department specializes in the diagnosis and treatment of disorders affecting '
            'the brain, spinal cord, nerves, and muscles, including stroke, epilepsy, headaches, and '
            'neurodegenerative diseases.'
        ),
        'features': [
            'Stroke treatment and prevention',
            'Epilepsy monitoring and management',
            'Headache and migraine treatment',
            'Movement disorder management',
        ],
    },
    {
        'id': 'ophthalmology',
        'title': 'Ophthalmology',
        'icon': 'eye',
        'summary': 'Complete eye care services including routine exams, treatments for eye diseases, and surgical procedures.',
        'description': (
            'Our ophthalmology department provides comprehensive eye care, from routine vision tests to '
            'treatment of complex eye conditions such as glaucoma, cataracts, macular degeneration, and more.'
        ),
        'features': [
            'Comprehensive eye examinations',
            'Cataract surgery',
            'Glaucoma treatment',
            'Refractive error correction',
        ],
    },
    {
        'id': 'orthopedics',
        'title': 'Orthopedics',
        'icon': 'bone',
        'summary': 'Treatment for musculoskeletal issues including fractures, joint problems, and spine disorders.',
        'description': (
            'Our orthopedics department specializes in the diagnosis, treatment, and prevention of '
            'disorders of the bones, joints, ligaments, tendons, and muscles.'
        ),
        'features': [
            'Joint replacement surgery',
            'Sports injury treatment',
            'Fracture care',
            'Spine disorder management',
        ],
    },
    {
        'id': 'pediatrics',
        'title': 'Pediatrics',
        'icon': 'baby',
        'summary': 'Comprehensive healthcare for infants, children, and adolescents, focusing on growth and development.',
        'description': (
            'Our pediatrics department provides comprehensive healthcare for infants, children, and '
            'adolescents, focusing on growth and development, preventive health, and treating '
            'childhood illnesses.'
        ),
        'features': [
            'Well-child visits and vaccinations',
            'Developmental assessments',
            'Acute illness care',
            'Chronic condition management',
        ],
    },
    {
        'id': 'pathology',
        'title': 'Pathology',
        'icon': 'activity',
        'summary': 'Diagnostic services including laboratory testing and analysis to identify diseases and conditions.',
        'description': (
            'Our pathology department provides essential diagnostic services including laboratory '
            'testing and analysis to identify diseases and conditions.'
        ),
        'features': [
            'Clinical laboratory testing',
            'Anatomic pathology',
            'Molecular diagnostics',
            'Blood banking and transfusion services',
        ],
    },
]

# Department tabs on the services page, in display order
SPECIALIST_TABS = [
    ('all', 'All Departments'),
    ('cardiology', 'Cardiology'),
    ('neurology', 'Neurology'),
    ('orthopedics', 'Orthopedics'),
]

SPECIALISTS_PER_TAB = 3


def get_department(service_id: str) -> Optional[dict]:
    for department in DEPARTMENTS:
        if department['id'] == service_id:
            return department
    return None


def department_card(department: dict) -> dict:
    return {
        'id': department['id'],
        'title': department['title'],
        'description': department['summary'],
        'icon': department['icon'],
        'link': f"/services/{department['id']}",
    }
