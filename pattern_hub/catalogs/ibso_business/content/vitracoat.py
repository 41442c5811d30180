OVERVIEW = """# Vitracoat Coating Management System - Overview

Sample management ERP for chemical formulation development in the powder
coating industry.

## Stack
- Next.js + TypeScript + Tailwind CSS + shadcn/ui
- PostgreSQL (Prisma schema, Drizzle queries)
- Azure Active Directory authentication

## Process
Client request -> formulation development -> quality validation -> sample production -> delivery

## Core Modules
1. Client management - country-specific validation, role-based visibility
2. Request management - LWR, TLWR and VLWR request types
3. Laboratory - formulation tracking and test results
4. Micro production - small batch scheduling
5. Configuration - catalogs for colors, finishes and test methods
"""

BUSINESS_WORKFLOWS = """# Vitracoat Business Workflows

## LWR (Laboratory Work Request)
1. Salesperson captures the request with client, color and finish
2. Lab manager assigns a formulator
3. Formulator records iterations until the target is matched
4. Quality approves the final formula
5. Sample ships; the request closes with the client's feedback

## TLWR (Testing Work Request)
Testing only, no formulation. Skips step 3 and attaches test protocol results.

## VLWR (Internal Request)
Raised by the lab itself. No client; approval goes to the lab manager.

## Status Rules
- Only the assigned formulator may move a request into "in progress"
- Rejected samples reopen the request at step 3 with the rejection reason
"""
