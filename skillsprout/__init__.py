"""SkillSprout backend: accounts, shareable courses and progress sync."""
