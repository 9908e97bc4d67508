from django.urls import reverse

from robots_generator.composer import GenerationInput, compose

def test_generator_page_defaults(client):
    response = client.get(reverse("generator"))
    assert response.status_code == 200
    assert response.context["generation_input"] == GenerationInput(
        strategy="maxVisibility", platform="custom", sitemap_url=""
    )
    assert response.context["robots_txt"] == compose(GenerationInput())
    assert len(response.context["search_crawlers"]) == 6
    assert len(response.context["ai_crawlers"]) == 14

def test_generator_page_renders_output_and_affordances(client):
    response = client.get(reverse("generator"))
    html = response.content.decode()
    assert "User-agent: GPTBot" in html
    assert "Maximum Visibility (Recommended)" in html
    assert 'id="copy-button"' in html
    assert reverse("generator-download") in html
    assert "How to use your robots.txt file" in html
    assert "Generated by Olavi" in html

def test_generator_page_binds_query_params(client):
    response = client.get(reverse("generator"), {
        "strategy": "aiOnly",
        "platform": "wordpress",
        "sitemap_url": "https://example.com/sitemap.xml",
    })
    assert response.status_code == 200
    robots_txt = response.context["robots_txt"]
    assert "# Blocked: AI-only visibility strategy" in robots_txt
    assert "Disallow: /wp-admin/" not in robots_txt
    assert "Sitemap: https://example.com/sitemap.xml" in robots_txt

def test_generator_page_invalid_choice_falls_back(client):
    response = client.get(reverse("generator"), {"strategy": "bogus", "platform": "shopify"})
    assert response.status_code == 200
    assert "strategy" in response.context["form"].errors
    assert response.context["generation_input"].strategy == "maxVisibility"
    assert response.context["generation_input"].platform == "shopify"
    assert "Disallow: /cart/" in response.context["robots_txt"]

def test_generator_page_rejects_post(client):
    response = client.post(reverse("generator"))
    assert response.status_code == 405

def test_generator_download(client):
    response = client.get(reverse("generator-download"), {"strategy": "traditional", "platform": "ecommerce"})
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    assert response["Content-Disposition"] == "attachment; filename=robots.txt"
    assert response.content.decode() == compose(
        GenerationInput(strategy="traditional", platform="ecommerce")
    )

def test_generator_download_defaults(client):
    response = client.get(reverse("generator-download"))
    assert response.status_code == 200
    assert response.content.decode() == compose(GenerationInput())

def test_generator_download_composes_bound_input(client, mocker):
    mock_compose = mocker.patch("robots_generator.views.web_views.compose", return_value="User-agent: *")
    response = client.get(reverse("generator-download"), {"platform": "wordpress", "sitemap_url": " "})
    assert response.content.decode() == "User-agent: *"
    mock_compose.assert_called_once_with(
        GenerationInput(strategy="maxVisibility", platform="wordpress", sitemap_url=" ")
    )
