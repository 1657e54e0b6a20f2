"""Actionable advice derived from the component scores."""

from __future__ import annotations

from ..schemas import ScoreBreakdown, SkillGap, UserProfile

GENERAL_ADVICE: tuple[str, ...] = (
    "Network actively in your target industry through LinkedIn, meetups, and events",
    "Research the job market and salary ranges for your target role",
    "Prepare a strong resume and cover letter tailored to your target role",
    "Practice interview skills, especially for technical roles",
)

CAREER_CHANGE_ADVICE: tuple[str, ...] = (
    "Conduct informational interviews with people in your target field",
    "Consider shadowing or internships to gain industry exposure",
)


class RecommendationGenerator:
    """Ordered recommendations: targeted advice first, general advice after."""

    def generate(
        self,
        profile: UserProfile,
        breakdown: ScoreBreakdown,
        skill_gaps: list[SkillGap],
    ) -> list[str]:
        recommendations: list[str] = []
        relevant_years = profile.experience.relevant_years

        if breakdown.experience_score < 70:
            recommendations.append(
                "Focus on gaining relevant experience through side projects, freelancing, or volunteering"
            )
            if relevant_years == 0:
                recommendations.append(
                    "Consider targeting an entry-level or junior role first to build experience"
                )

        if breakdown.skill_score < 70:
            critical = [gap.skill_name for gap in skill_gaps if gap.is_critical]
            if critical:
                recommendations.append(f"Prioritize learning: {', '.join(critical)}")
            recommendations.append("Build a portfolio showcasing your skills through real projects")

        if breakdown.education_score < 70 and profile.education.level in ("high_school", "none"):
            recommendations.append("Consider pursuing relevant certifications or online courses")
            recommendations.append(
                "Research if the role truly requires a degree, or if experience can substitute"
            )

        if breakdown.timeline_score < 50:
            recommendations.append("Consider extending your timeline to make the goal more achievable")
            recommendations.append("Break your goal into smaller milestones with intermediate targets")

        recommendations.extend(GENERAL_ADVICE)

        if relevant_years < 1:
            recommendations.extend(CAREER_CHANGE_ADVICE)

        return recommendations
