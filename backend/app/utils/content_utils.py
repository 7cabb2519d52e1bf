# backend/app/utils/content_utils.py
from backend.app.schemas.dashboard_schemas import Feature, HeadlineStat, LandingContent, Testimonial


def get_landing_content() -> LandingContent:
    """Static marketing copy for the home page"""
    return LandingContent(
        title="Predict Student Success",
        tagline=(
            "Harness the power of artificial intelligence to predict and improve student performance. "
            "Make data-driven decisions for better educational outcomes with our advanced analytics platform."
        ),
        features=[
            Feature(title="Real-time Analytics",
                    description="Get instant insights into student performance with live data visualization and tracking"),
            Feature(title="AI-Powered Predictions",
                    description="Advanced machine learning algorithms to predict student outcomes with 95% accuracy"),
            Feature(title="Secure & Private",
                    description="Enterprise-grade security with encrypted data storage and privacy protection"),
            Feature(title="Collaborative Tools",
                    description="Share insights and collaborate with teachers, parents, and administrators"),
        ],
        stats=[
            HeadlineStat(number="95%", label="Prediction Accuracy"),
            HeadlineStat(number="10K+", label="Students Tracked"),
            HeadlineStat(number="500+", label="Schools Using"),
            HeadlineStat(number="24/7", label="Real-time Updates"),
        ],
        testimonials=[
            Testimonial(name="Dr. Sarah Johnson", role="Principal, Springfield High", rating=5,
                        content="This platform has transformed how we track student progress. "
                                "The predictions are incredibly accurate!"),
            Testimonial(name="Michael Chen", role="Math Teacher", rating=5,
                        content="The real-time analytics help me identify struggling students early. "
                                "Game-changer for my classroom."),
            Testimonial(name="Emily Rodriguez", role="School Counselor", rating=5,
                        content="Finally, a tool that helps us provide targeted support to students "
                                "who need it most."),
        ],
    )
