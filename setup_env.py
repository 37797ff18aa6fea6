import os
import secrets

def generate_secret_key() -> str:
    # 48 random bytes -> 64 url-safe characters, well above the 32 character minimum
    return secrets.token_urlsafe(48)

def setup_env():
    if os.path.exists(".env"):
        response = input("A .env file already exists. Overwrite it? (y/N): ")
        if response.lower() != 'y':
            print("Aborted.")
            return

    if not os.path.exists(".env.example"):
        print("Error: .env.example not found.")
        return

    print("Reading .env.example...")
    with open(".env.example", "r") as f:
        env_content = f.read()

    new_lines = []
    for line in env_content.splitlines():
        if line.startswith("TOKEN_SECRET_KEY="):
            new_lines.append(f'TOKEN_SECRET_KEY="{generate_secret_key()}"')
        elif line.startswith("PASSWORD_PEPPER="):
            new_lines.append(f'PASSWORD_PEPPER="{secrets.token_hex(16)}"')
        else:
            new_lines.append(line)
            
    with open(".env", "w") as f:
        f.write("\n".join(new_lines))
        f.write("\n") # Ensure trailing newline

    print("SUCCESS: .env file created with a new token secret key.")

if __name__ == "__main__":
    setup_env()
