"""Catalog seeded by POST /api/services/migrate into an empty collection."""

_CLEANING = 'Cleaning Services'
_LAUNDRY = 'Laundry Services'
_MAINTENANCE = 'Maintenance Services'
_SPECIALIZED = 'Specialized Services'

_OFFICE = 'https://images.unsplash.com/photo-1497366216548-37526070297c?w=400&h=300&fit=crop&crop=center'
_TEAM = 'https://images.unsplash.com/photo-1552664730-d307ca884978?w=400&h=300&fit=crop&crop=center'
_WAREHOUSE = 'https://images.unsplash.com/photo-1589939705384-5185137a7f0f?w=400&h=300&fit=crop&crop=center'
_WASHING = 'https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=400&h=300&fit=crop&crop=center'
_SITE = 'https://images.unsplash.com/photo-1504307651254-35680f356dfd?w=400&h=300&fit=crop&crop=center'

DEFAULT_SERVICES = [
    {'title': 'Residential Cleaning', 'category': _CLEANING, 'imageUrl': _OFFICE,
     'description': 'Professional cleaning services for homes and residential properties'},
    {'title': 'Commercial Office Cleaning', 'category': _CLEANING, 'imageUrl': _TEAM,
     'description': 'Comprehensive cleaning solutions for offices and commercial spaces'},
    {'title': 'Industrial Facility Cleaning', 'category': _CLEANING, 'imageUrl': _WAREHOUSE,
     'description': 'Specialized cleaning for industrial facilities and warehouses'},
    {'title': 'High-Pressure Cleaning', 'category': _CLEANING, 'imageUrl': _WASHING,
     'description': 'High-pressure washing for exterior surfaces and hard-to-clean areas'},

    {'title': 'Residential Laundry', 'category': _LAUNDRY, 'imageUrl': _OFFICE,
     'description': 'Professional laundry services for your home'},
    {'title': 'Commercial Laundry', 'category': _LAUNDRY, 'imageUrl': _TEAM,
     'description': 'Large-scale laundry solutions for businesses'},
    {'title': 'Industrial Laundry', 'category': _LAUNDRY, 'imageUrl': _WAREHOUSE,
     'description': 'Heavy-duty laundry services for industrial needs'},
    {'title': 'Specialized Fabric Care', 'category': _LAUNDRY, 'imageUrl': _WASHING,
     'description': 'Delicate and specialized fabric cleaning services'},

    {'title': 'Post-Construction Cleaning', 'category': _MAINTENANCE, 'imageUrl': _SITE,
     'description': 'Thorough cleaning after construction or renovation projects'},
    {'title': 'Carpet & Upholstery Cleaning', 'category': _MAINTENANCE, 'imageUrl': _WAREHOUSE,
     'description': 'Deep cleaning for carpets, rugs, and upholstered furniture'},
    {'title': 'Window & Glass Cleaning', 'category': _MAINTENANCE, 'imageUrl': _OFFICE,
     'description': 'Streak-free window and glass surface cleaning'},
    {'title': 'Kitchen & Bathroom Deep Clean', 'category': _MAINTENANCE, 'imageUrl': _WASHING,
     'description': 'Intensive cleaning and sanitization for kitchens and bathrooms'},

    {'title': 'Event & Venue Cleaning', 'category': _SPECIALIZED, 'imageUrl': _SITE,
     'description': 'Pre and post-event cleaning for venues and special occasions'},
    {'title': 'Vehicle Cleaning', 'category': _SPECIALIZED, 'imageUrl': _OFFICE,
     'description': 'Professional cleaning services for vehicles and fleets'},
    {'title': 'Equipment Maintenance', 'category': _SPECIALIZED, 'imageUrl': _WAREHOUSE,
     'description': 'Maintenance and cleaning of equipment and machinery'},
    {'title': 'Quality Assurance', 'category': _SPECIALIZED, 'imageUrl': _TEAM,
     'description': 'Quality control and assurance for all our services'},
]
