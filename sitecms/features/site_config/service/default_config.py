"""Built-in site settings used until an admin saves their own."""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SITE_NAME = 'Willsther Professional Services'

_DEFAULT_SITE_CONFIG: Dict[str, Any] = {
    'siteName': SITE_NAME,
    'siteDescription': 'Professional cleaning and maintenance services',
    'contactEmail': 'willstherprofessionalservices@gmail.com',
    'contactPhone': '(233) 594 850 005',
    'maintenanceMode': False,
    'heroSlides': [
        {
            'imageUrl': 'https://images.unsplash.com/photo-1585421514738-01798e348b17?q=80&w=1974&auto=format&fit=crop',
            'title': 'Professional Cleaning',
            'subtitle': 'Trusted, reliable and affordable services',
            'ctaLabel': 'Get Quote',
            'ctaHref': '#contact',
        }
    ],
    'services': [],
    'about': {
        'title': 'Who We Are',
        'content': ('We provide a full range of professional cleaning services for residential, '
                    'commercial, and industrial clients across Ghana.'),
        'imageUrl': '',
    },
    'navigation': [
        {'name': 'Home', 'href': '#home', 'isHash': True, 'enabled': True},
        {'name': 'About', 'href': '#about', 'isHash': True, 'enabled': True},
        {'name': 'Services', 'href': '#services', 'isHash': True, 'enabled': True},
        {'name': 'Shop', 'href': '/shop', 'isHash': False, 'enabled': True},
        {'name': 'Blog', 'href': '/blog', 'isHash': False, 'enabled': True},
        {'name': 'Contact', 'href': '#contact', 'isHash': True, 'enabled': True},
    ],
    'footer': {
        'address': 'Mahogany Street, #7 New Achimota, Accra, Ghana',
        'description': ('Professional maintenance, refurbishment, and cleaning services for industrial, '
                        'commercial, and domestic properties.'),
        'social': {'facebook': '', 'instagram': '', 'twitter': '', 'linkedin': ''},
        'copyright': None,  # filled with the current year on read
        'links': {
            'services': [
                {'name': 'Residential Cleaning', 'href': '#services'},
                {'name': 'Commercial Cleaning', 'href': '#services'},
                {'name': 'Industrial Cleaning', 'href': '#services'},
                {'name': 'Maintenance Services', 'href': '#services'},
            ],
            'company': [
                {'name': 'About Us', 'href': '#about'},
                {'name': 'Our Team', 'href': '#about'},
                {'name': 'Blog', 'href': '/blog'},
                {'name': 'Contact', 'href': '#contact'},
            ],
            'support': [
                {'name': 'Help Center', 'href': '#'},
                {'name': 'Service Areas', 'href': '#'},
                {'name': 'FAQs', 'href': '#'},
                {'name': 'Support', 'href': '#'},
            ],
        },
        'privacyPolicy': '#',
        'termsOfService': '#',
    },
    'seo': {
        'defaultTitle': SITE_NAME,
        'defaultDescription': 'Cleaning and maintenance services for homes and businesses in Ghana.',
        'keywords': ['cleaning', 'maintenance', 'ghana', 'willsther'],
    },
    'map': {'embedUrl': '', 'lat': None, 'lng': None, 'zoom': 14},
    'testimonials': [],
    'gallery': [],
}


def default_site_config() -> Dict[str, Any]:
    """A fresh copy of the defaults; callers may mutate it."""
    config = copy.deepcopy(_DEFAULT_SITE_CONFIG)
    year = datetime.now(timezone.utc).year
    config['footer']['copyright'] = f'© {year} {SITE_NAME}. All rights reserved.'
    return config


def merge_site_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Shallow merge: top-level keys from `override` replace those in `base`."""
    merged = dict(base)
    if isinstance(override, dict):
        merged.update(override)
    return merged
