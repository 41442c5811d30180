CLIENT_DELIVERY = """# Client Delivery Workflow

1. Kickoff - confirm scope against the signed SOW, share the project plan
2. Design - wireframes and approvals, one revision round per milestone
3. Build - two-week iterations, demo at the end of each
4. QA - automated test run plus client acceptance testing on staging
5. Launch - production deploy, DNS cutover, monitoring checks
6. Handover - documentation, credentials transfer, training session
7. Support - 30-day warranty window, then the maintenance agreement

Each step closes with a written sign-off stored in the project docs.
"""
