ONBOARDING_CHECKLIST = """# Client Onboarding Checklist

## Pre-Project
- [ ] Discovery call: needs, pain points, goals
- [ ] Technical assessment of existing systems
- [ ] Budget and timeline alignment
- [ ] Stakeholders and decision makers identified
- [ ] Success metrics agreed

## Contract
- [ ] Statement of Work signed (agency://contracts/sow-template)
- [ ] NDA executed
- [ ] Milestone-based payment terms agreed
- [ ] Change request process defined

## Technical Setup
- [ ] Cloud account access with scoped IAM roles
- [ ] Repository created from agency://templates/project-structure
- [ ] Staging and production environments
- [ ] CI/CD pipeline
- [ ] Monitoring and alerting

## Communication
- [ ] Dedicated client channel
- [ ] Weekly status meeting scheduled
- [ ] Shared documentation space
"""
