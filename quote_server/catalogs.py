"""Literal quote catalogs.

Built once at import and never mutated; every handler shares the same
instances. Ids are unique within each catalog (checked at import). The same
id may appear in two catalogs with different prices, e.g. ``online-booking``
as an additional feature and as a component feature.
"""

from __future__ import annotations

from quote_server.models.catalog import (
    BrandFeature,
    CatalogItem,
    ComponentCatalog,
    EmergencyTier,
    QuotePackage,
    ServiceZone,
    check_unique_ids,
)

PACKAGES: tuple[QuotePackage, ...] = (
    QuotePackage(
        id="hvac-appliance-website",
        name="Professional HVAC & Appliance Website",
        price=1200,
        original_price=1700,
        timeline="18-24 days",
        description="Complete professional website for HVAC and appliance repair businesses",
        included_features=(
            "Professional Homepage",
            "Mobile-Responsive Design",
            "Contact Forms & Phone Integration",
            "Service Pages (HVAC & Appliance)",
            "About Us Page",
            "Emergency Service Call Buttons",
            "Service Area Coverage",
            "Basic SEO Optimization",
            "Google Analytics Integration",
            "Customer Testimonials Section",
            "Business Hours & Location",
            "Brand Support Information",
        ),
    ),
)

ADDITIONAL_FEATURES: tuple[CatalogItem, ...] = (
    CatalogItem(
        id="online-booking",
        name="Smart Booking & Scheduling",
        price=450,
        timeline="8-12 days",
        description="Appointment booking with calendar sync, SMS reminders and automated confirmations for HVAC maintenance scheduling.",
        icon="calendar",
    ),
    CatalogItem(
        id="enhanced-seo",
        name="Premium Local SEO",
        price=350,
        timeline="10-15 days",
        description="Local SEO including Google Business Profile management, local citations and review management.",
        icon="trending-up",
    ),
    CatalogItem(
        id="social-media",
        name="Social Media Hub",
        price=250,
        timeline="5-7 days",
        description="Facebook, Instagram and Google Business feeds showcasing HVAC work and customer reviews.",
        icon="share-2",
    ),
    CatalogItem(
        id="customer-portal",
        name="Customer Service Portal",
        price=550,
        timeline="12-18 days",
        description="Customer portal with service history, digital invoices, maintenance schedules and warranty tracking.",
        icon="users",
    ),
    CatalogItem(
        id="live-chat",
        name="24/7 Live Chat Support",
        price=400,
        timeline="6-9 days",
        description="Live chat with HVAC-specific automated responses and emergency service requests.",
        icon="message-circle",
    ),
    CatalogItem(
        id="advanced-analytics",
        name="Business Intelligence Dashboard",
        price=500,
        timeline="9-14 days",
        description="Analytics dashboard with lead tracking, conversion optimization and business performance metrics.",
        icon="bar-chart-3",
    ),
)

_PAGES = (
    CatalogItem(id="hvac-homepage", name="Professional HVAC & Appliance Homepage", price=0,
                description="Homepage with emergency call buttons, service highlights and customer testimonials"),
    CatalogItem(id="service-pages", name="Comprehensive Service Pages", price=0,
                description="Pages for HVAC repair, appliance repair, installation and maintenance services"),
    CatalogItem(id="contact-form", name="Contact Form & Phone Integration", price=0,
                description="Contact forms with phone integration, lead capture and automated responses"),
    CatalogItem(id="business-hours", name="Business Hours & Location", price=0,
                description="Business hours, location information and map integration"),
    CatalogItem(id="about-us", name="About Us Page", price=99,
                description="Company history, team information and credentials"),
    CatalogItem(id="testimonials-page", name="Customer Testimonials Page", price=149,
                description="Dedicated page for customer reviews and success stories"),
    CatalogItem(id="service-areas-page", name="Service Areas Page", price=199,
                description="Service areas with interactive map and coverage information"),
    CatalogItem(id="warranty-page", name="Warranty Information Page", price=99,
                description="Warranty terms, conditions and coverage details"),
    CatalogItem(id="faq-page", name="FAQ Page", price=149,
                description="Common HVAC and appliance repair questions"),
)

_COMPONENT_FEATURES = (
    CatalogItem(id="local-seo", name="Local SEO Optimization", price=0,
                description="Local SEO with Google Business Profile integration"),
    CatalogItem(id="google-analytics", name="Google Analytics Integration", price=0,
                description="Visitor tracking and performance monitoring"),
    CatalogItem(id="email-support", name="Email Support System", price=0,
                description="Email support with ticket tracking and basic technical assistance"),
    CatalogItem(id="hvac-brand-support", name="HVAC Brand Support", price=0,
                description="Carrier, Trane, Lennox, Rheem and Goodman with warranty information"),
    CatalogItem(id="appliance-brand-support", name="Appliance Brand Support", price=0,
                description="Samsung, LG, Whirlpool, GE and Maytag with service manuals"),
    CatalogItem(id="emergency-services", name="Emergency Service Management", price=299,
                description="Emergency HVAC and appliance services page with 24/7 availability"),
    CatalogItem(id="mobile-design", name="Mobile-Optimized Design", price=0,
                description="Responsive design with a touch-friendly interface"),
    CatalogItem(id="online-booking", name="Online Booking & Scheduling", price=399,
                description="Scheduling for maintenance and repair appointments with calendar integration"),
    CatalogItem(id="testimonials", name="Customer Reviews & Testimonials", price=199,
                description="Customer reviews with a rating system"),
    CatalogItem(id="service-areas", name="Service Area Management", price=249,
                description="Coverage map with zip code lookup and radius display"),
    CatalogItem(id="premium-seo", name="Premium SEO & Content Strategy", price=399,
                description="Keyword optimization, content strategy and performance tracking"),
    CatalogItem(id="social-links", name="Social Media Links", price=99,
                description="Links and sharing buttons for Facebook, Instagram and Google"),
    CatalogItem(id="social-feeds", name="Social Media Feeds Integration", price=199,
                description="Social feeds, posting and analytics dashboard"),
    CatalogItem(id="advanced-analytics", name="Advanced Analytics Dashboard", price=299,
                description="Lead tracking, conversion optimization and performance monitoring"),
    CatalogItem(id="priority-support", name="Priority Support", price=199,
                description="Priority phone and live chat assistance"),
    CatalogItem(id="commercial-hvac-support", name="Commercial HVAC Support", price=149,
                description="Extended support for commercial HVAC systems"),
    CatalogItem(id="commercial-appliance-support", name="Commercial Appliance Support", price=149,
                description="Extended support for commercial appliances"),
    CatalogItem(id="maintenance-programs", name="Maintenance Programs", price=149,
                description="Seasonal and preventive maintenance with automated reminders"),
    CatalogItem(id="installation-services", name="Installation Services", price=149,
                description="Installation, replacement and old appliance removal with warranty"),
    CatalogItem(id="commercial-hvac", name="Commercial HVAC Systems", price=199,
                description="Rooftop units, package units and industrial systems"),
    CatalogItem(id="commercial-appliances", name="Commercial Appliance Systems", price=199,
                description="Commercial kitchen, restaurant and industrial equipment"),
    CatalogItem(id="service-request", name="Service Request System", price=149,
                description="Service request management with status tracking and notifications"),
    CatalogItem(id="request-forms", name="Service Request Forms", price=99,
                description="Request forms per service type with validation"),
)

_TECHNICAL = (
    CatalogItem(id="ssl-certificate", name="SSL Security Certificate", price=79,
                description="SSL certificate for HTTPS"),
    CatalogItem(id="backup-system", name="Automated Backup System", price=99,
                description="Daily backups with 30-day retention"),
    CatalogItem(id="cdn-integration", name="CDN Integration", price=149,
                description="Content delivery network for faster loading"),
    CatalogItem(id="database-optimization", name="Database Optimization", price=199,
                description="Faster queries and improved performance"),
    CatalogItem(id="api-integration", name="API Integration", price=299,
                description="Third-party service integration and data synchronization"),
    CatalogItem(id="performance-monitoring", name="Performance Monitoring", price=149,
                description="Uptime tracking and alerting"),
    CatalogItem(id="security-scanning", name="Security Scanning", price=199,
                description="Regular vulnerability assessment"),
    CatalogItem(id="load-balancing", name="Load Balancing", price=399,
                description="High traffic handling and improved reliability"),
    CatalogItem(id="caching-system", name="Advanced Caching System", price=179,
                description="Caching for faster page loads"),
    CatalogItem(id="mobile-app", name="Mobile App Development", price=599,
                description="Native apps for iOS and Android"),
)

COMPONENTS = ComponentCatalog(pages=_PAGES, features=_COMPONENT_FEATURES, technical=_TECHNICAL)

ADDON_SERVICES: tuple[CatalogItem, ...] = (
    CatalogItem(id="content-creation", name="Professional Content Creation", price=450, timeline="12-18 days",
                description="Service descriptions, company story, blog posts and SEO-optimized content.",
                icon="file-text"),
    CatalogItem(id="google-ads-setup", name="Google Ads & PPC Management", price=600, timeline="8-12 days",
                description="Google Ads setup with local targeting, conversion tracking and first month management.",
                icon="trending-up"),
    CatalogItem(id="website-maintenance", name="Premium Website Maintenance", price=150, timeline="3-5 days",
                description="Monthly security updates, performance optimization and content updates.",
                icon="settings"),
    CatalogItem(id="mobile-app-development", name="Mobile App Development", price=1599, timeline="25-35 days",
                description="iOS and Android app with service booking, emergency contact and service tracking.",
                icon="smartphone"),
    CatalogItem(id="sms-integration", name="SMS Integration & Notifications", price=299, timeline="7-10 days",
                description="Appointment reminders, service updates and emergency notifications by text message.",
                icon="message-circle"),
    CatalogItem(id="multi-language-support", name="Multi-Language Support", price=199, timeline="10-15 days",
                description="Language switcher, translated content and localized SEO. Includes 2 languages.",
                icon="languages"),
    CatalogItem(id="domain-reservation", name="Domain Name Reservation", price=20, timeline="2-3 days",
                description="Domain name reservation and registration.",
                icon="globe"),
    CatalogItem(id="cpanel-hosting-3months", name="cPanel Hosting (3 Months)", price=60, timeline="2-3 days",
                description="cPanel hosting for 3 months with SSL certificate, email hosting and database support.",
                icon="server"),
    CatalogItem(id="cpanel-hosting-1year", name="cPanel Hosting (1 Year)", price=200, timeline="2-3 days",
                description="cPanel hosting for 1 year with SSL certificate, email hosting and database support.",
                icon="server"),
    CatalogItem(id="advanced-security-audit", name="Advanced Security & Audit", price=399, timeline="8-12 days",
                description="Security audit, vulnerability assessment, penetration testing and compliance reporting.",
                icon="shield-check"),
)

EMERGENCY_SERVICES: tuple[EmergencyTier, ...] = (
    EmergencyTier(
        id="standard-emergency",
        name="Standard Emergency Service",
        price=149,
        response_time="2-4 hours",
        features=(
            "24/7 emergency hotline",
            "Same-day service availability",
            "Emergency dispatch system",
            "Customer notification system",
        ),
    ),
    EmergencyTier(
        id="premium-emergency",
        name="Premium Emergency Service",
        price=299,
        response_time="1-2 hours",
        features=(
            "Priority emergency response",
            "Real-time technician tracking",
            "Advanced notification system",
            "Extended service hours",
            "Emergency parts availability",
        ),
    ),
    EmergencyTier(
        id="vip-emergency",
        name="VIP Emergency Service",
        price=449,
        response_time="30-60 minutes",
        features=(
            "Ultra-fast emergency response",
            "Dedicated emergency team",
            "Premium customer support",
            "Guaranteed response time",
            "Comprehensive emergency coverage",
        ),
    ),
)

SERVICE_AREAS: tuple[ServiceZone, ...] = (
    ServiceZone(
        id="primary-zone",
        name="Primary Service Zone",
        price=0,
        radius="15-mile radius",
        response_time="Same day",
        features=(
            "Standard service coverage",
            "Regular maintenance visits",
            "Emergency service availability",
            "Local parts availability",
        ),
    ),
    ServiceZone(
        id="extended-zone",
        name="Extended Service Zone",
        price=199,
        radius="30-mile radius",
        response_time="Next day",
        features=(
            "Extended service coverage",
            "Travel time included",
            "Emergency service with surcharge",
            "Remote diagnostics available",
        ),
    ),
    ServiceZone(
        id="premium-zone",
        name="Premium Service Zone",
        price=349,
        radius="50-mile radius",
        response_time="Within 48 hours",
        features=(
            "Maximum service coverage",
            "Premium travel arrangements",
            "Emergency service priority",
            "Comprehensive service guarantee",
        ),
    ),
)

HVAC_FEATURES: tuple[BrandFeature, ...] = (
    BrandFeature(id="hvac-brand-support", name="HVAC Brand Support", price=149,
                 description="Service coverage for all major HVAC brands",
                 brands=("Carrier", "Trane", "Lennox", "Rheem", "Goodman", "Bryant", "American Standard")),
    BrandFeature(id="commercial-hvac", name="Commercial HVAC Systems", price=299,
                 description="Rooftop units, package units and industrial systems",
                 brands=("All Commercial Brands", "Rooftop Units", "Package Units", "Industrial Systems")),
    BrandFeature(id="maintenance-programs", name="Maintenance Programs", price=199,
                 description="Seasonal and preventive maintenance scheduling",
                 brands=("All Systems", "Bi-annual", "Annual", "Preventive")),
    BrandFeature(id="hvac-installation", name="HVAC Installation Services", price=249,
                 description="System installation with warranty and support",
                 brands=("Carrier", "Trane", "Lennox", "Rheem", "Goodman")),
    BrandFeature(id="hvac-repair", name="HVAC Repair Services", price=199,
                 description="Repair for all major brands and systems",
                 brands=("All Major Brands", "Residential", "Commercial")),
)

APPLIANCE_FEATURES: tuple[BrandFeature, ...] = (
    BrandFeature(id="appliance-brand-support", name="Appliance Brand Support", price=149,
                 description="Service coverage for all major appliance brands",
                 brands=("Samsung", "LG", "Whirlpool", "GE", "Maytag", "Bosch", "KitchenAid")),
    BrandFeature(id="commercial-appliances", name="Commercial Appliance Systems", price=299,
                 description="Commercial kitchen, restaurant and industrial equipment",
                 brands=("All Commercial Brands", "Restaurant Equipment", "Industrial Systems", "Kitchen Equipment")),
    BrandFeature(id="installation-services", name="Installation Services", price=199,
                 description="Installation, replacement and old appliance removal",
                 brands=("All Brands", "Installation", "Replacement", "Removal")),
    BrandFeature(id="refrigerator-repair", name="Refrigerator Repair", price=179,
                 description="Refrigerator repair for all major brands",
                 brands=("Samsung", "LG", "Whirlpool", "GE", "Frigidaire")),
    BrandFeature(id="washer-dryer-repair", name="Washer & Dryer Repair", price=159,
                 description="Washer and dryer repair services",
                 brands=("Maytag", "Whirlpool", "Samsung", "LG", "GE")),
)

CONTACT_FEATURES: tuple[CatalogItem, ...] = (
    CatalogItem(id="emergency-hotline", name="24/7 Emergency Hotline", price=149,
                description="Dedicated hotline for urgent HVAC and appliance issues"),
    CatalogItem(id="online-chat", name="Live Chat Support", price=99,
                description="Real-time chat for customer inquiries and scheduling"),
    CatalogItem(id="callback-request", name="Callback Request System", price=79,
                description="Automated callback requests"),
    CatalogItem(id="contact-forms", name="Advanced Contact Forms", price=89,
                description="Contact forms with file uploads and service selection"),
    CatalogItem(id="phone-integration", name="Phone System Integration", price=199,
                description="Business phone system integration and call tracking"),
)

for _name, _records in (
    ("packages", PACKAGES),
    ("additional-features", ADDITIONAL_FEATURES),
    ("components.pages", COMPONENTS.pages),
    ("components.features", COMPONENTS.features),
    ("components.technical", COMPONENTS.technical),
    ("addon-services", ADDON_SERVICES),
    ("emergency-services", EMERGENCY_SERVICES),
    ("service-areas", SERVICE_AREAS),
    ("hvac-features", HVAC_FEATURES),
    ("appliance-features", APPLIANCE_FEATURES),
    ("contact-features", CONTACT_FEATURES),
):
    check_unique_ids(_name, _records)
