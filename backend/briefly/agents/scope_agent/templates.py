"""Canned scope templates, one builder per archetype.

Each builder returns a freshly constructed `ScopeOutput`. Module-level content
is held in tuples so nothing mutable is shared between calls.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from .classifier import Archetype
from .rules import (
    decide_backend,
    decide_frontend,
    decide_generic_lookalikes,
    decide_payment_integration,
)
from .schema import (
    BackendFrontendTasks,
    BusinessLookalike,
    ClientInput,
    EstimatedTimeline,
    ScopeOutput,
    Sprint,
    TechStack,
    TimelinePhase,
)

ScopeBuilder = Callable[[ClientInput], ScopeOutput]


def _timeline(total: str, phases: Sequence[Tuple[str, str]]) -> EstimatedTimeline:
    return EstimatedTimeline(
        total=total,
        breakdown=tuple(TimelinePhase(phase=p, duration=d) for p, d in phases),
    )


def _sprints(plan: Sequence[Tuple[str, Sequence[str]]]) -> Tuple[Sprint, ...]:
    return tuple(Sprint(sprint=name, deliverables=tuple(items)) for name, items in plan)


# ===================================================================== #
#  Pet-care marketplace                                                   #
# ===================================================================== #

_PET_FUNCTIONAL_SCOPE = (
    "User authentication system with OAuth 2.0 and JWT implementation",
    "Pet sitter profile management with RESTful API endpoints",
    "Geo-location based search with PostGIS spatial queries",
    "Real-time calendar availability system with WebSocket notifications",
    "Booking system with transaction management and idempotency keys",
    "Review and rating system with sentiment analysis",
    "Payment processing with PCI-compliant tokenization",
    "WebRTC-based in-app messaging between pet owners and sitters",
    "Role-based access control (RBAC) admin panel",
    "Event-driven notification system (email, push, SMS) with queuing",
)

_PET_INTEGRATIONS = (
    "Stripe Connect for marketplace payment processing and escrow functionality",
    "Google Maps Places API for address autocomplete and geolocation",
    "Google Calendar API for availability synchronization",
    "SendGrid for transactional email delivery with templating",
    "Twilio for SMS and WhatsApp notifications",
    "Firebase Cloud Messaging for push notifications",
    "Sentry.io for error tracking and performance monitoring",
)

_PET_THIRD_PARTY_TOOLS = (
    "Cloudinary for responsive image processing and optimization",
    "Auth0 or Supabase Auth for secure authentication and authorization",
    "Redis for rate limiting, caching, and session management",
    "ElasticSearch for full-text search capabilities with geographic filtering",
    "Algolia for fast, typo-tolerant search functionality",
    "Segment for analytics data collection and distribution",
    "Sentry for error tracking and monitoring",
    "Mixpanel for user behavior analytics",
)

_PET_LOOKALIKES = (
    {
        "name": "Rover.com",
        "url": "https://www.rover.com",
        "note": (
            "Market leader in pet sitting services with similar booking flow. Their "
            "mobile-first design focuses on quick matches based on location."
        ),
        "key_features": (
            "Calendar-based sitter availability",
            "In-app messaging between owners and sitters",
            "Secure payments with service guarantee",
            "Comprehensive review system",
        ),
        "tech_implementation": (
            "Location-indexed sitter search, escrow-style payments released after "
            "the stay, and push notifications for booking status changes."
        ),
    },
    {
        "name": "Wag!",
        "url": "https://wagwalking.com",
        "note": (
            "Similar service with focus on dog walking and real-time GPS tracking "
            "of walks, run on an on-demand service model."
        ),
        "key_features": (
            "Real-time GPS tracking of walks",
            "Gamification elements for walkers",
            "Owner photo/video updates during service",
            "Emergency veterinary telehealth consultations",
        ),
        "tech_implementation": (
            "Streaming location updates from the walker app over WebSockets, media "
            "uploads to object storage, and on-demand dispatch matching."
        ),
    },
    {
        "name": "PetBacker",
        "url": "https://www.petbacker.com",
        "note": (
            "International pet sitting platform with comprehensive review system "
            "and verification process."
        ),
        "key_features": (
            "Multi-language support",
            "International payment processing",
            "Identity verification for sitters",
            "Support for exotic pet types",
        ),
        "tech_implementation": (
            "Localized content and currency handling, third-party identity "
            "verification, and multi-region payment providers."
        ),
    },
)

_PET_TIMELINE = (
    ("UI/UX Design & Prototyping", "2-3 weeks"),
    ("Frontend Architecture & Core Components", "2 weeks"),
    ("Frontend Feature Implementation", "3-4 weeks"),
    ("Backend API Development", "4-5 weeks"),
    ("Integration & System Testing", "1-2 weeks"),
    ("Performance Optimization", "1 week"),
    ("Deployment & DevOps", "1 week"),
)

_PET_BACKEND_TASKS = (
    "OAuth 2.0 & JWT authentication service",
    "User management API with role-based permissions",
    "Pet sitter profile & availability API with validation",
    "Geospatial search API with PostgreSQL/PostGIS",
    "Booking system with transaction management",
    "Payment processing service with webhooks",
    "Review & rating system with aggregation logic",
    "WebSocket messaging service with history",
    "Event-based notification broker service",
    "Admin panel API with analytics endpoints",
)

_PET_FRONTEND_TASKS = (
    "Authentication flows with persistent sessions",
    "User profile management interfaces",
    "Pet sitter profile creation wizard",
    "Interactive availability calendar component",
    "Location-based search UI with map integration",
    "Booking and checkout flow with validation",
    "Payment form with card tokenization",
    "Real-time messaging interface with attachments",
    "Review submission and display components",
    "Responsive design system with mobile-first approach",
    "Admin dashboard with analytics visualization",
)

_PET_SPRINTS = (
    ("Sprint 1 (2 weeks)", (
        "Project setup and architecture decisions",
        "Authentication service implementation",
        "Core UI component library setup",
        "Basic navigation and routing structure",
    )),
    ("Sprint 2 (2 weeks)", (
        "User profile management (backend + frontend)",
        "Pet sitter profile creation flow",
        "Availability calendar implementation",
        "Database schema finalization with migrations",
    )),
    ("Sprint 3 (2 weeks)", (
        "Search API with geolocation filters",
        "Search results UI with map integration",
        "Basic booking flow implementation",
        "Payment gateway integration (Stripe Connect)",
    )),
    ("Sprint 4 (2 weeks)", (
        "Booking management UI for both user types",
        "Review and rating system implementation",
        "Real-time messaging architecture",
        "Notification service setup",
    )),
    ("Sprint 5 (2 weeks)", (
        "Admin panel development",
        "Analytics and reporting features",
        "Payment system finalization with disputes",
        "Comprehensive logging and monitoring setup",
    )),
    ("Sprint 6 (2 weeks)", (
        "System-wide testing and bug fixing",
        "Performance optimization",
        "Security audit and fixes",
        "Deployment pipeline and documentation",
    )),
    ("Sprint 7 (2 weeks - buffer)", (
        "Feature polishing and UX improvements",
        "Final bug fixes and edge case handling",
        "Production deployment and monitoring setup",
        "Knowledge transfer and documentation finalization",
    )),
)

_PET_GAP_WARNING = (
    "The client request does not specify regulatory requirements for handling user "
    "data (GDPR, CCPA compliance) and payment information, which is critical for a "
    "platform dealing with financial transactions. There's also no mention of a user "
    "verification system for pet sitters (background checks, identity verification) "
    "which would increase trust and safety on the platform. Additionally, the "
    "requirement for offline functionality and handling of emergency situations is "
    "not addressed."
)

_PET_BRIEF = (
    "We're going to build a comprehensive platform where pet owners can easily find "
    "and book trustworthy pet sitters in their area. Your customers will be able to "
    "create profiles, search for sitters based on location and availability, read "
    "reviews from other pet owners, and securely book and pay for services.\n\n"
    "Pet sitters will have their own profiles where they can showcase their "
    "experience, set their availability, and manage booking requests. The platform "
    "will include a messaging system so owners and sitters can communicate directly.\n\n"
    "Your admin dashboard will give you full control over the platform, allowing you "
    "to manage users, monitor bookings, and ensure quality service.\n\n"
    "The platform will work seamlessly on both mobile phones and desktop computers, "
    "making it accessible to all your potential users. We'll implement secure payment "
    "processing, location-based searching, and real-time availability updates to "
    "create a smooth and trustworthy experience for everyone involved."
)


def build_pet_care_scope(client_input: ClientInput) -> ScopeOutput:
    """Pet-care marketplace template. Ignores preferred stack and references."""
    return ScopeOutput(
        functional_scope=_PET_FUNCTIONAL_SCOPE,
        tech_stack=TechStack(
            frontend=(
                "React 18 with TypeScript 5.0+, Redux Toolkit for state management, "
                "React Query for data fetching, Styled Components with Tailwind CSS, "
                "Vite for build system"
            ),
            backend=(
                "Node.js 20+ with Express.js, GraphQL API with Apollo Server, "
                "Socket.io for real-time features, Jest for testing, TypeORM for ORM"
            ),
            database=(
                "PostgreSQL 15+ with PostGIS extension for geospatial queries, "
                "Redis for caching and session management"
            ),
            other=(
                "Docker and Docker Compose for containerization, GitHub Actions for "
                "CI/CD, AWS S3 for object storage, Cloudflare for CDN and DDoS protection"
            ),
        ),
        integrations=_PET_INTEGRATIONS,
        third_party_tools=_PET_THIRD_PARTY_TOOLS,
        business_lookalikes=tuple(BusinessLookalike(**entry) for entry in _PET_LOOKALIKES),
        estimated_timeline=_timeline("14-16 weeks", _PET_TIMELINE),
        backend_frontend_tasks=BackendFrontendTasks(
            backend=_PET_BACKEND_TASKS,
            frontend=_PET_FRONTEND_TASKS,
        ),
        sprint_breakdown=_sprints(_PET_SPRINTS),
        scope_gap_warning=_PET_GAP_WARNING,
        client_friendly_brief=_PET_BRIEF,
    )


# ===================================================================== #
#  Generic web application                                                #
# ===================================================================== #

_GENERIC_FUNCTIONAL_SCOPE = (
    "Secure user authentication with multi-factor authentication (MFA) support",
    "Comprehensive user profile management with role-based permissions",
    "Feature-rich application core with domain-specific business logic",
    "Advanced search functionality with filters and faceted navigation",
    "Administrator dashboard with analytics and user management",
    "Responsive design system supporting mobile, tablet, and desktop views",
    "RESTful API architecture with comprehensive documentation",
    "Automated testing suite covering critical user journeys",
)

_GENERIC_DATABASE = (
    "PostgreSQL 15+ with connection pooling, Redis for caching, potentially MongoDB "
    "for specific features requiring document storage"
)

_GENERIC_INTEGRATIONS_TAIL = (
    "Email service provider (SendGrid/Mailgun) for transactional emails",
    "S3-compatible storage for user uploads and assets",
    "Monitoring and error tracking integration (Sentry/DataDog)",
    "Analytics platform integration (Google Analytics/Mixpanel)",
    "Social auth providers (if applicable)",
)

_GENERIC_THIRD_PARTY_TOOLS = (
    "Comprehensive logging and monitoring stack (ELK or Grafana/Prometheus)",
    "Error tracking and performance monitoring (Sentry/New Relic)",
    "Content delivery network for asset optimization",
    "Feature flagging system for controlled rollouts",
    "A/B testing framework for UX optimization",
    "Automated CI/CD pipeline with GitHub Actions/Jenkins",
)

_GENERIC_TIMELINE = (
    ("Discovery & Design", "2-3 weeks"),
    ("Frontend Architecture", "1-2 weeks"),
    ("Backend Architecture", "1-2 weeks"),
    ("Core Feature Implementation", "4-5 weeks"),
    ("Integration & Testing", "2-3 weeks"),
    ("Performance Optimization", "1 week"),
    ("Deployment & Launch Preparation", "1 week"),
)

_GENERIC_BACKEND_TASKS = (
    "Authentication service with JWT and refresh token rotation",
    "User management API with RBAC implementation",
    "Core domain model and business logic APIs",
    "Database schema design with migrations strategy",
    "Search and filtering API with pagination",
    "Integration with third-party services",
    "Background jobs and scheduled tasks",
    "API documentation and testing suite",
)

_GENERIC_FRONTEND_TASKS = (
    "Authentication UI flows with state persistence",
    "Component library and design system implementation",
    "State management architecture",
    "Form validation framework with error handling",
    "Data fetching strategy with caching",
    "User profile and settings interfaces",
    "Core application feature interfaces",
    "Responsive design implementation",
    "Administrative interface and dashboard",
)

_GENERIC_SPRINTS = (
    ("Sprint 1 (2 weeks)", (
        "Project setup and architecture decisions",
        "Authentication service implementation",
        "Core UI component library development",
        "Initial project structure and CI pipeline",
    )),
    ("Sprint 2 (2 weeks)", (
        "User authentication flows (frontend)",
        "User profile management (backend)",
        "Database schema implementation",
        "Core API endpoints development",
    )),
    ("Sprint 3 (2 weeks)", (
        "Core feature implementation part 1",
        "User profile interface development",
        "API integration with frontend",
        "Unit and integration tests for critical paths",
    )),
    ("Sprint 4 (2 weeks)", (
        "Core feature implementation part 2",
        "Search functionality with filters",
        "Admin dashboard foundation",
        "Third-party integrations",
    )),
    ("Sprint 5 (2 weeks)", (
        "Admin dashboard completion",
        "Analytics implementation",
        "Performance optimization round 1",
        "System-wide testing and bug fixing",
    )),
    ("Sprint 6 (2 weeks)", (
        "Final UI polish and responsiveness",
        "Performance optimization round 2",
        "Security audit and hardening",
        "Documentation and deployment preparation",
    )),
    ("Sprint 7 (2 weeks - buffer)", (
        "Bug fixing and edge case handling",
        "Production environment setup",
        "Monitoring and logging implementation",
        "Knowledge transfer and launch support",
    )),
)

_GENERIC_GAP_WARNING = (
    "The client description lacks specific details about data privacy requirements, "
    "expected user workflows, specific security requirements, and performance "
    "expectations under load. Additionally, there's insufficient information about "
    "integration with existing systems or data migration requirements if replacing "
    "an existing solution. More clarity is needed on international/localization "
    "requirements if the application will be used globally."
)


def _generic_brief(project_goal: str) -> str:
    focus = project_goal.strip() or "meeting your business goals"
    return (
        f"We'll be building a sophisticated web application that focuses on {focus}. "
        "The platform will include secure user accounts with role-based permissions, "
        "intuitive navigation, and all the core functionality needed to achieve your "
        "business objectives.\n\n"
        "Your customers will enjoy a seamless experience on any device, with fast "
        "loading times and an intuitive interface that guides them through each step "
        "of their journey. As an administrator, you'll have a comprehensive dashboard "
        "to manage users, content, and monitor key metrics to inform your business "
        "decisions.\n\n"
        "The system will be built with scalability and security at its core, allowing "
        "for future enhancements as your business grows. We'll use modern, reliable "
        "technologies that ensure optimal performance and flexibility, making it "
        "easier to add new features down the line.\n\n"
        "The application will be thoroughly tested and optimized before launch to "
        "ensure a smooth experience for all users from day one."
    )


def build_generic_scope(client_input: ClientInput) -> ScopeOutput:
    """Generic web application template, parametrised by stack, goal and references."""
    return ScopeOutput(
        functional_scope=_GENERIC_FUNCTIONAL_SCOPE,
        tech_stack=TechStack(
            frontend=decide_frontend(client_input.preferred_stack),
            backend=decide_backend(client_input.preferred_stack),
            database=_GENERIC_DATABASE,
        ),
        integrations=(
            decide_payment_integration(client_input.project_goal),
            *_GENERIC_INTEGRATIONS_TAIL,
        ),
        third_party_tools=_GENERIC_THIRD_PARTY_TOOLS,
        business_lookalikes=decide_generic_lookalikes(client_input.references),
        estimated_timeline=_timeline("12-16 weeks", _GENERIC_TIMELINE),
        backend_frontend_tasks=BackendFrontendTasks(
            backend=_GENERIC_BACKEND_TASKS,
            frontend=_GENERIC_FRONTEND_TASKS,
        ),
        sprint_breakdown=_sprints(_GENERIC_SPRINTS),
        scope_gap_warning=_GENERIC_GAP_WARNING,
        client_friendly_brief=_generic_brief(client_input.project_goal),
    )


# Every Archetype must have a builder.
SCOPE_TEMPLATES: Dict[Archetype, ScopeBuilder] = {
    Archetype.PET_CARE_MARKETPLACE: build_pet_care_scope,
    Archetype.GENERIC_WEB_APPLICATION: build_generic_scope,
}
